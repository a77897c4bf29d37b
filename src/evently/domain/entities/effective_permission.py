"""Effective permission - resolved, never persisted."""

from dataclasses import dataclass

from evently.domain.value_objects import PermissionSource


@dataclass(frozen=True)
class EffectivePermission:
    """Permission code in force for a user, with where it came from."""

    code: str
    source: PermissionSource

"""Effective permission merge - role grants overlaid by user overrides."""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from evently.domain.entities import PermissionOverride
from evently.domain.value_objects import PermissionSource


def merge_effective_permissions(
    role_codes: Iterable[str],
    overrides: Iterable[PermissionOverride],
) -> Mapping[str, PermissionSource]:
    """Merge role permission codes with active user overrides.

    Overrides must already be filtered to the ones in force. A grant sets the
    code with source `user` whether or not the role had it; a revoke removes
    the code even when the role grants it. Overrides are keyed by distinct
    permission, so their order does not matter.

    Returns a read-only mapping of permission code to source.
    """
    merged: dict[str, PermissionSource] = dict.fromkeys(role_codes, PermissionSource.ROLE)
    for override in overrides:
        if override.granted:
            merged[override.permission_code] = PermissionSource.USER
        else:
            merged.pop(override.permission_code, None)
    return MappingProxyType(merged)

"""Where an effective permission comes from."""

from enum import StrEnum


class PermissionSource(StrEnum):
    """Source tag of an effective permission."""

    ROLE = "role"
    USER = "user"

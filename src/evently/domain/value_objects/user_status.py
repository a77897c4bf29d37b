"""User account status."""

from enum import StrEnum


class UserStatus(StrEnum):
    """Account status. Gates authentication only, never permission resolution."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DELETED = "DELETED"

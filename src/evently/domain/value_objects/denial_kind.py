"""Authorization denial kinds."""

from enum import StrEnum


class DenialKind(StrEnum):
    """Why an authorization check denied the operation."""

    AUTHENTICATION_REQUIRED = "authentication_required"
    INSUFFICIENT_PERMISSIONS = "insufficient_permissions"

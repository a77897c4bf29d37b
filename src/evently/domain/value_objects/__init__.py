"""Domain value objects."""

from evently.domain.value_objects.denial_kind import DenialKind
from evently.domain.value_objects.permission_source import PermissionSource
from evently.domain.value_objects.user_status import UserStatus

__all__ = [
    "DenialKind",
    "PermissionSource",
    "UserStatus",
]

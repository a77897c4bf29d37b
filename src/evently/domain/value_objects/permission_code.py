"""Permission code - `resource:action` identifier."""

import re

from evently.domain.exceptions import ValidationError

_PART_RE = re.compile(r"^[a-z][a-z0-9_-]*$")


def build_code(resource: str, action: str) -> str:
    """Build a permission code from its parts, validating both."""
    resource = resource.strip().lower()
    action = action.strip().lower()
    if not _PART_RE.match(resource):
        raise ValidationError(f"Invalid permission resource: {resource!r}")
    if not _PART_RE.match(action):
        raise ValidationError(f"Invalid permission action: {action!r}")
    return f"{resource}:{action}"


def split_code(code: str) -> tuple[str, str]:
    """Split `resource:action` into its parts."""
    resource, sep, action = code.partition(":")
    if not sep or not resource or not action or ":" in action:
        raise ValidationError(f"Invalid permission code: {code!r}")
    return resource, action

"""Request parsing helpers shared by resources."""

from datetime import datetime
from typing import Any
from uuid import UUID

import falcon.asgi

from evently.application.dto.permission_dto import PermissionRef
from evently.domain.exceptions import ValidationError


def parse_uuid(value: str, label: str) -> UUID:
    try:
        return UUID(value)
    except (TypeError, ValueError, AttributeError):
        raise ValidationError(f"Invalid {label}") from None


def parse_datetime(value: Any, label: str) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Invalid {label}")
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"Invalid {label}") from None


def optional_str(body: dict[str, Any], key: str) -> str | None:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{key} must be a string")
    return value


async def get_json_object(req: falcon.asgi.Request, required: bool = True) -> dict[str, Any]:
    """Request body as a JSON object. An absent body is `{}` when not required."""
    body = await req.get_media(default_when_empty=None if required else {})
    if body is None:
        raise ValidationError("Request body is required")
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def permission_ref_from(body: dict[str, Any]) -> PermissionRef:
    """`permission_id` and/or `permission_code` from a request body."""
    raw_id = body.get("permission_id")
    return PermissionRef(
        permission_id=parse_uuid(raw_id, "permission_id") if raw_id is not None else None,
        permission_code=optional_str(body, "permission_code"),
    )

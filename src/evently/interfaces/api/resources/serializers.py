"""Entity to JSON conversion for API responses."""

from datetime import datetime

from evently.domain.entities import (
    EffectivePermission,
    Permission,
    Role,
    RoleDetails,
    RoleSummary,
    UserPermission,
)


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def permission_to_dict(p: Permission) -> dict:
    return {
        "id": str(p.id),
        "code": p.code,
        "resource": p.resource,
        "action": p.action,
        "description": p.description,
        "category": p.category,
    }


def role_to_dict(r: Role) -> dict:
    return {
        "id": str(r.id),
        "name": r.name,
        "description": r.description,
        "priority": r.priority,
        "is_system": r.is_system,
        "created_at": _iso(r.created_at),
        "updated_at": _iso(r.updated_at),
    }


def role_summary_to_dict(s: RoleSummary) -> dict:
    return {
        **role_to_dict(s.role),
        "user_count": s.user_count,
        "permission_count": s.permission_count,
    }


def role_details_to_dict(d: RoleDetails) -> dict:
    return {
        **role_to_dict(d.role),
        "permissions": [permission_to_dict(p) for p in d.permissions],
    }


def effective_to_dict(e: EffectivePermission) -> dict:
    return {"code": e.code, "source": e.source.value}


def override_to_dict(o: UserPermission, active: bool | None = None) -> dict:
    data = {
        "id": str(o.id),
        "user_id": o.user_id,
        "permission_id": str(o.permission_id),
        "permission_code": o.permission_code,
        "granted": o.granted,
        "expires_at": _iso(o.expires_at),
        "granted_by": o.granted_by,
        "reason": o.reason,
        "updated_at": _iso(o.updated_at),
    }
    if active is not None:
        data["active"] = active
    return data

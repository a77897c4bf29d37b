"""Role DTOs."""

from dataclasses import dataclass


@dataclass
class RoleCreateInput:
    """Input for creating a role."""

    name: str
    description: str | None = None
    priority: int = 0


@dataclass
class RoleUpdate:
    """Partial update of a role. `None` leaves the field unchanged."""

    name: str | None = None
    description: str | None = None
    priority: int | None = None

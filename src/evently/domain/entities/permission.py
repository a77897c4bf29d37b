"""Permission entity - catalog entry for one allowed operation."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Permission:
    """Permission - `resource:action` code with descriptive metadata.

    `code`, `resource` and `action` are fixed once created; only
    `description` and `category` are editable.
    """

    id: UUID
    resource: str
    action: str
    code: str
    created_at: datetime
    description: str | None = None
    category: str | None = None

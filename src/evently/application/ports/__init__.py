"""Application ports - interfaces for external adapters."""

from evently.application.ports.clock import Clock
from evently.application.ports.permission_resolver import PermissionResolver
from evently.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Clock",
    "PermissionResolver",
    "UnitOfWork",
    "UnitOfWorkFactory",
]

"""Domain exceptions."""


class EventlyError(Exception):
    """Base exception for Evently."""

    pass


class AuthenticationRequired(EventlyError):
    """No authenticated identity is attached to the request."""

    pass


class InsufficientPermissions(EventlyError):
    """Identity is known but lacks the permission the operation requires."""

    pass


class NotFound(EventlyError):
    """Requested resource was not found."""

    pass


class Conflict(EventlyError):
    """Operation would violate a uniqueness or reference constraint."""

    pass


class ValidationError(EventlyError):
    """Validation failed for input data."""

    pass


class Forbidden(EventlyError):
    """Operation is not allowed on a protected resource (e.g. a system role)."""

    pass

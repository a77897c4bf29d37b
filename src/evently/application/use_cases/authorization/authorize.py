"""Authorize use case - allow or deny one operation for one identity."""

from collections.abc import Sequence
from dataclasses import dataclass

from evently.application.ports import PermissionResolver
from evently.domain.exceptions import AuthenticationRequired, InsufficientPermissions
from evently.domain.value_objects import DenialKind

Requirement = str | Sequence[str]


@dataclass(frozen=True)
class AuthorizationDecision:
    """Outcome of an authorization check."""

    allowed: bool
    denial: DenialKind | None = None

    @classmethod
    def allow(cls) -> "AuthorizationDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, kind: DenialKind) -> "AuthorizationDecision":
        return cls(allowed=False, denial=kind)

    def raise_for_denial(self) -> None:
        """Raise the domain exception matching the denial, if any."""
        if self.allowed:
            return
        if self.denial is DenialKind.AUTHENTICATION_REQUIRED:
            raise AuthenticationRequired("Authentication required")
        raise InsufficientPermissions("Insufficient permissions")


def normalize_requirement(requirement: Requirement) -> tuple[str, ...]:
    """Turn a single code or a sequence of codes into a tuple of codes."""
    if isinstance(requirement, str):
        return (requirement,)
    return tuple(requirement)


class AuthorizeUseCase:
    """Check a required-permission expression against effective permissions.

    Resolution runs on every call. The check has no side effects.
    """

    def __init__(self, permission_resolver: PermissionResolver) -> None:
        self._resolver = permission_resolver

    async def execute(
        self,
        user_id: str | None,
        requirement: Requirement,
        require_all: bool = False,
    ) -> AuthorizationDecision:
        """Allow iff any (or, with `require_all`, every) required code is held."""
        if not user_id:
            return AuthorizationDecision.deny(DenialKind.AUTHENTICATION_REQUIRED)

        required = normalize_requirement(requirement)
        if not required:
            return AuthorizationDecision.deny(DenialKind.INSUFFICIENT_PERMISSIONS)

        held = await self._resolver.resolve_codes(user_id)
        check = all if require_all else any
        if check(code in held for code in required):
            return AuthorizationDecision.allow()
        return AuthorizationDecision.deny(DenialKind.INSUFFICIENT_PERMISSIONS)

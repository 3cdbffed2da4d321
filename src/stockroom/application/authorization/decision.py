"""Gate decisions and the shared gate base class."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from stockroom.domain.exceptions import (
    AccountDisabled,
    AuthorizationError,
    InternalLookupFailure,
    MissingCredentials,
    StockroomError,
)
from stockroom.domain.principal import PrincipalContext


@dataclass(frozen=True)
class GateDecision:
    """Outcome of one gate. A denial always carries the error to surface."""

    allowed: bool
    error: AuthorizationError | None = None


ALLOW = GateDecision(allowed=True)


def deny(error: AuthorizationError) -> GateDecision:
    return GateDecision(allowed=False, error=error)


class Gate(ABC):
    """One authorization rule evaluated fresh per request.

    ``evaluate`` returns a decision for allow/deny outcomes and raises for
    outcomes that are not a permission decision (``InvalidMethod``,
    ``InternalLookupFailure``).
    """

    @abstractmethod
    async def evaluate(self, context: PrincipalContext) -> GateDecision: ...

    async def allow(self, context: PrincipalContext) -> bool:
        return (await self.evaluate(context)).allowed

    async def enforce(self, context: PrincipalContext) -> None:
        decision = await self.evaluate(context)
        if not decision.allowed:
            raise decision.error


def check_principal(context: PrincipalContext) -> GateDecision | None:
    """Fail closed on an absent principal or a deactivated account."""
    principal = context.principal
    if principal is None:
        return deny(MissingCredentials("Authentication required"))
    if not principal.is_active:
        return deny(AccountDisabled())
    return None


@contextmanager
def catalog_lookup(what: str) -> Iterator[None]:
    """Report unexpected catalog errors as InternalLookupFailure."""
    try:
        yield
    except StockroomError:
        raise
    except Exception as e:
        raise InternalLookupFailure(f"Error reading {what}") from e

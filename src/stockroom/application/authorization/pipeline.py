"""Ordered gate pipeline."""

from collections.abc import Sequence

from stockroom.application.authorization.decision import ALLOW, Gate, GateDecision
from stockroom.domain.principal import PrincipalContext


class AuthorizationPipeline:
    """Runs gates in declaration order; the first denial ends the pipeline."""

    def __init__(self, operation: str, gates: Sequence[Gate]) -> None:
        self.operation = operation
        self.gates = tuple(gates)

    async def evaluate(self, context: PrincipalContext) -> GateDecision:
        for gate in self.gates:
            decision = await gate.evaluate(context)
            if not decision.allowed:
                return decision
        return ALLOW

    async def allow(self, context: PrincipalContext) -> bool:
        return (await self.evaluate(context)).allowed

    def __repr__(self) -> str:
        return f"AuthorizationPipeline({self.operation!r}, {list(self.gates)!r})"

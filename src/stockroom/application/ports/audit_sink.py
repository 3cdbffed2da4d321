"""Audit sink port - receives successful authorization outcomes."""

from typing import Any, Protocol

from stockroom.domain.principal import Principal


class AuditSink(Protocol):
    """Port for recording authorized operations."""

    async def record(
        self, principal: Principal, operation: str, details: dict[str, Any]
    ) -> None: ...

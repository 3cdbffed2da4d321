"""Audit sink that writes authorized operations to the audit logger."""

import logging
from typing import Any

from stockroom.domain.principal import Principal

logger = logging.getLogger("stockroom.audit")


class LoggingAuditSink:
    """One INFO record per authorized operation."""

    async def record(
        self, principal: Principal, operation: str, details: dict[str, Any]
    ) -> None:
        extras = " ".join(f"{k}={v}" for k, v in details.items() if v is not None)
        logger.info(
            "authorized operation=%s user=%s role=%s store=%s %s",
            operation,
            principal.user_id,
            principal.role,
            principal.store_id,
            extras,
        )

"""Application ports - interfaces for external adapters."""

from stockroom.application.ports.audit_sink import AuditSink
from stockroom.application.ports.token_verifier import TokenVerifier, VerifiedToken
from stockroom.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuditSink",
    "TokenVerifier",
    "UnitOfWork",
    "UnitOfWorkFactory",
    "VerifiedToken",
]

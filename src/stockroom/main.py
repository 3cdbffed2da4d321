"""Application entry point and composition root."""

import logging

import uvicorn
from falcon.asgi import App

from stockroom import __version__
from stockroom.config import Settings, get_settings
from stockroom.infrastructure.audit.logging_audit_sink import LoggingAuditSink
from stockroom.infrastructure.auth.keycloak_provider import KeycloakTokenVerifier
from stockroom.infrastructure.persistence.postgres.connection import create_pool
from stockroom.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from stockroom.interfaces.api.app import create_app
from stockroom.interfaces.api.middleware.cors import CORSMiddleware
from stockroom.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware

logger = logging.getLogger("stockroom")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level="DEBUG" if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_stockroom_app() -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    verifier = KeycloakTokenVerifier(
        server_url=settings.keycloak_url,
        realm=settings.keycloak_realm,
        client_id=settings.keycloak_client_id,
        client_secret=settings.keycloak_client_secret,
    )

    return create_app(
        uow_factory,
        verifier,
        audit_sink=LoggingAuditSink(),
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            PoolLifespanMiddleware(pool, settings.db_connect_timeout),
        ],
    )


def main() -> None:
    """CLI entry point - run the API under uvicorn."""
    settings = get_settings()
    configure_logging(settings)
    logger.info("Stockroom v%s (%s)", __version__, settings.environment)
    uvicorn.run(
        create_stockroom_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

"""Application entry points and composition root."""

import asyncio
import logging

from evently import __version__
from evently.application.use_cases.catalog.seed_catalog import SeedCatalogUseCase
from evently.config import get_settings
from evently.infrastructure.auth.keycloak_provider import KeycloakProvider
from evently.infrastructure.clock import SystemClock
from evently.infrastructure.persistence.postgres.connection import create_pool
from evently.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from evently.interfaces.api.app import create_app
from evently.interfaces.api.middleware.auth import AuthMiddleware
from evently.interfaces.api.middleware.cors import CORSMiddleware
from evently.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from evently.interfaces.api.middleware.request_logging import RequestLoggingMiddleware
from evently.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_evently_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min,
        max_size=settings.database_pool_max,
        timeout=settings.database_pool_timeout,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set; every request is unauthenticated")

    return create_app(
        uow_factory,
        SystemClock(),
        middleware=[
            RequestLoggingMiddleware(),
            CORSMiddleware(settings.cors_origin_list),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
        pool=pool,
    )


def main() -> None:
    """Run the API server under uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level, settings.debug)
    logger.info("Evently v%s starting (%s)", __version__, settings.environment)
    uvicorn.run(
        create_evently_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


async def _seed() -> None:
    settings = get_settings()
    pool = create_pool(settings.database_url, min_size=1, max_size=2)
    await pool.open(wait=True)
    try:
        await SeedCatalogUseCase(
            create_uow_factory(pool),
            SystemClock(),
            admin_user_id=settings.bootstrap_admin_id or None,
            admin_email=settings.bootstrap_admin_email or None,
        ).execute()
    finally:
        await pool.close()


def seed() -> None:
    """Create the default permission catalog and roles."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.debug)
    asyncio.run(_seed())

"""Logging configuration for the application."""

import logging
import sys

from forum.config import Settings
from forum.util.error import ConfigurationError

_DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    if settings.environment == "production" and (
        settings.auth.jwt_secret == _DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")

    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Quiet the driver and server access logs
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger("forum").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )

"""Logging configuration for the application."""

import logging
import sys

from eventtalk.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Sets up plain stdlib logging with a level based on environment. Domain
    code logs through Logfire; this covers library loggers such as
    uvicorn and SQLAlchemy.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "test":
        level = logging.WARNING
    else:
        level = logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    # Our application loggers stay at the configured level
    logging.getLogger("eventtalk").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )


"""Logging setup for the Blog Pessoal API."""

import logging

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger.

    Args:
        level: Log level name, e.g. "INFO" or "DEBUG".

    Raises:
        ValueError: If the level name is unknown.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger().setLevel(numeric_level)

    # Keep SQLAlchemy quiet unless explicitly debugging
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if numeric_level <= logging.DEBUG else logging.WARNING
    )

"""Logging configuration."""

import logging
import sys

from staff_admin.config.settings import get_settings


def setup_logging() -> None:
    """Send staff_admin logs to stdout at the configured level."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper())

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("staff_admin").setLevel(level)

    # SQL echo only when explicitly debugging
    sql_level = logging.INFO if level <= logging.DEBUG else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)

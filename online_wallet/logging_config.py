"""
Logging configuration for the online wallet service.

Sets the root level from settings and keeps chatty third-party loggers quiet.
"""

import logging

from online_wallet.config import settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def configure_logging():
    """Configure logging for the application."""
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    # Library loggers - WARNING unless we are debugging
    quiet_level = logging.DEBUG if log_level == logging.DEBUG else logging.WARNING
    for logger_name in ("sqlalchemy.engine", "alembic", "slowapi"):
        logging.getLogger(logger_name).setLevel(quiet_level)

    logging.getLogger("online_wallet").setLevel(log_level)

"""Root logging configuration for the server process."""

import logging.config

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a single console handler on the root logger.

    Loggers created before this call (module-level ``getLogger(__name__)``)
    are kept enabled.
    """
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": LOG_FORMAT},
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {
                "level": level or settings.log_level,
                "handlers": ["console"],
            },
            "loggers": {
                # SQL echo is controlled by SQLAlchemy itself
                "sqlalchemy.engine": {"level": "WARNING"},
            },
        }
    )

from __future__ import annotations

import logging.config


def configure_logging(*, level: str = "INFO", debug: bool = False) -> None:
    """Console logging for the app and its modules."""

    effective = "DEBUG" if debug else str(level or "INFO").upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "detailed": {
                    "format": "{asctime} {levelname} [{name}:{lineno}] {message}",
                    "style": "{",
                },
            },
            "handlers": {
                "console": {
                    "level": effective,
                    "class": "logging.StreamHandler",
                    "formatter": "detailed",
                },
            },
            "loggers": {
                "src.session_insights": {"handlers": ["console"], "level": effective, "propagate": False},
            },
            "root": {"handlers": ["console"], "level": "WARNING"},
        }
    )

import os
from logging import config, getLevelName, getLogger
from typing import Any

LOGGER_NAME = "neutral"
LOG_FORMAT = "%(levelprefix)s %(asctime)s - %(name)s - %(message)s"
ACCESS_LOG_FORMAT = '%(levelprefix)s %(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s'
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_log_config(level: str | None = None) -> dict[str, Any]:
    """dictConfig for the gateway: the `neutral` logger plus uvicorn's own loggers.

    The level defaults to the LOG_LEVEL environment variable (DEBUG, INFO, WARNING, ERROR).
    """
    log_level = getLevelName((level or os.getenv("LOG_LEVEL", "INFO")).upper())
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": ACCESS_LOG_FORMAT,
                "datefmt": DATE_FORMAT,
                "use_colors": True,
            },
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": LOG_FORMAT,
                "datefmt": DATE_FORMAT,
                "use_colors": True,
            },
        },
        "handlers": {
            "access": {"class": "logging.StreamHandler", "formatter": "access", "stream": "ext://sys.stdout"},
            "default": {"class": "logging.StreamHandler", "formatter": "default", "stream": "ext://sys.stderr"},
        },
        "loggers": {
            LOGGER_NAME: {"handlers": ["default"], "level": log_level, "propagate": False},
            "uvicorn": {"handlers": ["default"], "level": log_level, "propagate": True},
            "uvicorn.access": {"handlers": ["access"], "level": log_level, "propagate": False},
            "uvicorn.error": {"level": log_level, "propagate": False},
        },
    }


def configure_logging(level: str | None = None) -> None:
    config.dictConfig(build_log_config(level))


# The client library itself never logs; only the gateway writes to this logger.
logger = getLogger(LOGGER_NAME)

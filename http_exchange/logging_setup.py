"""Central logging configuration for http-exchange.

Applies a root stdout handler so all ``http_exchange.*`` loggers emit records
without per-module setup, and avoids duplicate handlers when called twice.
"""
from __future__ import annotations
import copy
import logging
from logging.config import dictConfig

_DICT_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s:%(name)s:%(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        }
    },
    "root": {"level": "INFO", "handlers": ["console"]},
    "loggers": {
        "http_exchange": {"level": "INFO", "propagate": True},
    },
}

def configure_logging(level: str = "INFO") -> None:
    """Configure library-wide logging once.

    If the root logger already has handlers, only the ``http_exchange`` level
    is adjusted so host applications keep control of their own output.
    """
    root = logging.getLogger()
    if root.handlers:
        logging.getLogger("http_exchange").setLevel(level.upper())
        return
    config = copy.deepcopy(_DICT_CONFIG)
    config["handlers"]["console"]["level"] = level.upper()
    config["loggers"]["http_exchange"]["level"] = level.upper()
    dictConfig(config)


__all__ = ["configure_logging"]

"""Configuration utilities for http-exchange.

This module loads configuration with the following rules:
- Primary source: `exchange_config.json` at the project root.
- Overrides: environment variables, then optional text files under `config/`.
- Validation: Pydantic models enforce value constraints.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError as PydanticValidationError, field_validator


CONFIG_DIR = Path("config")
ROOT_EXCHANGE_CONFIG = Path("exchange_config.json")
logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        # Recoverable: log and ignore unreadable override
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


class ExchangeConfig(BaseModel):
    base_url: str = "http://localhost"
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def base_url_must_be_absolute(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("base_url must be a non-empty string")
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def load_config() -> ExchangeConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables
    2) Text files in `config/` (optional)
    3) exchange_config.json at project root
    4) Model defaults
    """

    base = _read_json_file(ROOT_EXCHANGE_CONFIG)

    def _base(key: str) -> Optional[str]:
        value = base.get(key) if isinstance(base, dict) else None
        return str(value) if value is not None else None

    values: dict[str, str] = {}
    base_url = _env("HTTP_EXCHANGE_BASE_URL") or _read_config_file("base_url") or _base("base_url")
    if base_url is not None:
        values["base_url"] = base_url
    log_level = _env("HTTP_EXCHANGE_LOG_LEVEL") or _read_config_file("log_level") or _base("log_level")
    if log_level is not None:
        values["log_level"] = log_level

    try:
        return ExchangeConfig(**values)
    except PydanticValidationError as e:
        logger.error("Invalid http-exchange configuration: %s", e)
        raise


__all__ = [
    "ExchangeConfig",
    "load_config",
]

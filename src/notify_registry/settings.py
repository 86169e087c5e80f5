from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


class RegistrySettings(BaseModel):
    """Registry behaviour and logging knobs."""

    prune_empty_topics: bool = True  # drop a topic once its last subscriber leaves
    log_failures: bool = True
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, env_file: str | None = ".env") -> "RegistrySettings":
        """Build settings from NOTIFY_* environment variables (after loading a dotenv file)."""
        if env_file:
            load_dotenv(env_file, override=False)
        return cls(
            prune_empty_topics=_env_flag("NOTIFY_PRUNE_EMPTY_TOPICS", True),
            log_failures=_env_flag("NOTIFY_LOG_FAILURES", True),
            log_level=os.getenv("NOTIFY_LOG_LEVEL", "INFO"),
        )

    def to_dict(self):
        return self.model_dump()

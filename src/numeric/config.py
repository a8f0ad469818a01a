"""Environment-driven settings for the numeric toolkit."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

ENV_RANDOM_SEED = "NUMERIC_TOOLKIT_RANDOM_SEED"
ENV_LOG_LEVEL = "NUMERIC_TOOLKIT_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


@dataclass(frozen=True)
class ToolkitConfig:
    """
    Settings shared by the toolkit and its demo driver.

    random_seed:
      None selects OS entropy (``random.SystemRandom``); an int selects a
      reproducible ``random.Random(seed)``.
    log_level:
      Level name applied by the demo driver's handler. The library itself
      never installs handlers.
    """

    random_seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.random_seed is not None and (
            not isinstance(self.random_seed, int) or isinstance(self.random_seed, bool)
        ):
            raise TypeError("random_seed must be an int or None")
        if not isinstance(self.log_level, str):
            raise TypeError("log_level must be a str")
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}: {self.log_level}")
        object.__setattr__(self, "log_level", level)

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls) -> "ToolkitConfig":
        return cls(
            random_seed=_env_optional_int(ENV_RANDOM_SEED),
            log_level=_env_str(ENV_LOG_LEVEL, "WARNING"),
        )

"""Runtime settings for the roster CLI.

Read from ROSTER_* environment variables, then overridden by CLI flags.
Self-contained — no external dependencies.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_TRUTHY = ("1", "true", "yes", "on")


def parse_log_level(value: Optional[str]) -> Optional[str]:
    """Normalize a level name ('debug' → 'DEBUG'). None if unknown."""
    if not value:
        return None
    name = value.strip().upper()
    return name if name in _LOG_LEVELS else None


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one CLI invocation."""

    log_level: str = DEFAULT_LOG_LEVEL
    no_color: bool = False

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from the environment.

        Args:
            env: Mapping to read instead of os.environ (tests pass a dict).
        """
        env = os.environ if env is None else env
        level = parse_log_level(env.get("ROSTER_LOG_LEVEL")) or DEFAULT_LOG_LEVEL
        no_color = env.get("ROSTER_NO_COLOR", "").strip().lower() in _TRUTHY
        return cls(log_level=level, no_color=no_color)

    def with_overrides(
        self,
        log_level: Optional[str] = None,
        no_color: Optional[bool] = None,
    ) -> Settings:
        """Apply CLI flags on top of env settings.

        Raises:
            ValueError: log_level is not a known level name.
        """
        settings = self
        if log_level is not None:
            level = parse_log_level(log_level)
            if level is None:
                raise ValueError(f"Unknown log level: {log_level}")
            settings = replace(settings, log_level=level)
        if no_color:
            settings = replace(settings, no_color=True)
        return settings

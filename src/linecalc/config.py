"""Runtime settings for the command line, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PROMPT = " > "
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class Settings:
    """Settings for one CLI run."""

    prompt: str = DEFAULT_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> Settings:
        """
        Build settings from ``LINECALC_PROMPT`` and ``LINECALC_LOG_LEVEL``.

        An unknown log level falls back to the default.
        """
        log_level = os.environ.get("LINECALC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if log_level not in LOG_LEVELS:
            log_level = DEFAULT_LOG_LEVEL

        return cls(
            prompt=os.environ.get("LINECALC_PROMPT", DEFAULT_PROMPT),
            log_level=log_level,
        )

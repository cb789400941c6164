"""Runtime settings read from environment variables."""

import logging
import math
import os
from dataclasses import dataclass

from user_finder.domain.mapper import MAPPERS

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_PARSER = "text"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Settings for the user finder session."""

    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    parser: str = DEFAULT_PARSER
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Unset variables fall back to the defaults above.

        Raises:
            ValueError: If a variable holds an unusable value
        """
        api_url = os.getenv("GITHUB_API_URL", DEFAULT_API_URL).strip().rstrip("/")
        if not api_url:
            raise ValueError("GITHUB_API_URL must not be empty")

        raw_timeout = os.getenv("GITHUB_API_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"GITHUB_API_TIMEOUT must be a number, got '{raw_timeout}'") from None
        if not math.isfinite(timeout) or timeout <= 0:
            raise ValueError(f"GITHUB_API_TIMEOUT must be a positive finite number, got {timeout}")

        parser = os.getenv("USER_FINDER_PARSER", DEFAULT_PARSER).strip().lower()
        if parser not in MAPPERS:
            raise ValueError(
                f"USER_FINDER_PARSER must be one of {', '.join(sorted(MAPPERS))}, got '{parser}'"
            )

        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"LOG_LEVEL '{log_level}' is not a logging level")

        return cls(api_url=api_url, timeout=timeout, parser=parser, log_level=log_level)

from __future__ import annotations

import logging
import os

from dataclasses import dataclass
from typing import Final, Optional

logger = logging.getLogger(__name__)

DEFAULT_LENGTH: Final[int] = 16
DEFAULT_LOG_LEVEL: Final[str] = 'WARNING'
DEFAULT_MAX_LENGTH: Final[int] = 4096

ENV_DEFAULT_LENGTH: Final[str] = 'RANDOMPASS_DEFAULT_LENGTH'
ENV_LOG_LEVEL: Final[str] = 'RANDOMPASS_LOG_LEVEL'
ENV_MAX_LENGTH: Final[str] = 'RANDOMPASS_MAX_LENGTH'


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError:
        logger.warning('Ignoring %s=%r: not an integer', name, value)
        return default
    if parsed < 0:
        logger.warning('Ignoring %s=%r: must not be negative', name, value)
        return default
    return parsed


@dataclass(frozen=True)
class Settings:
    """
    Runtime defaults for the CLI and GUI.

    Values come from the environment when set, otherwise the module defaults.
    """

    default_length: int = DEFAULT_LENGTH
    log_level: str = DEFAULT_LOG_LEVEL
    max_length: int = DEFAULT_MAX_LENGTH

    def parse_length(self, raw: str) -> Optional[int]:
        """
        Parse a user-typed length.

        Returns:
            The length, or None if ``raw`` is not a non-negative integer
            or exceeds max_length.
        """
        try:
            length = int(raw)
        except ValueError:
            return None
        if not 0 <= length <= self.max_length:
            return None
        return length

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from RANDOMPASS_* environment variables."""
        max_length = _env_int(ENV_MAX_LENGTH, DEFAULT_MAX_LENGTH)
        default_length = min(_env_int(ENV_DEFAULT_LENGTH, DEFAULT_LENGTH), max_length)
        log_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()

        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning('Ignoring %s=%r: unknown level', ENV_LOG_LEVEL, log_level)
            log_level = DEFAULT_LOG_LEVEL

        return cls(
            default_length=default_length,
            log_level=log_level,
            max_length=max_length,
        )

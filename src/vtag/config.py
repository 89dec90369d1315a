"""
Environment-driven settings for vtag.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

LOG_LEVEL_ENV = "VTAG_LOG_LEVEL"
SLOW_RESOLVE_ENV = "VTAG_SLOW_RESOLVE_MS"
MAX_DEPTH_ENV = "VTAG_MAX_DEPTH"
DEFAULT_ENCODER_ENV = "VTAG_DEFAULT_ENCODER"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SLOW_RESOLVE_MS = 50
DEFAULT_MAX_DEPTH = 32


def _parse_int(value: str, *, key: str, minimum: int = 0) -> int:
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, received {value!r}") from exc
    if parsed < minimum:
        raise ConfigurationError(f"{key} must be >= {minimum}, received {parsed}")
    return parsed


def _read_int(env_var: str, *, default: int, override: Optional[int], minimum: int = 0) -> int:
    if override is not None:
        return override
    value = os.getenv(env_var)
    if value is None or not value.strip():
        return default
    return _parse_int(value, key=env_var, minimum=minimum)


def resolve_log_level(override: Optional[str] = None) -> int:
    name = override or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"{LOG_LEVEL_ENV} must be a logging level name, received {name!r}")
    return level


def resolve_slow_resolve_ms(default: int = DEFAULT_SLOW_RESOLVE_MS, override: Optional[int] = None) -> int:
    return _read_int(SLOW_RESOLVE_ENV, default=default, override=override)


def resolve_max_depth(default: int = DEFAULT_MAX_DEPTH, override: Optional[int] = None) -> int:
    return _read_int(MAX_DEPTH_ENV, default=default, override=override, minimum=1)


def resolve_default_encoder_name(override: Optional[str] = None) -> Optional[str]:
    value = override if override is not None else os.getenv(DEFAULT_ENCODER_ENV)
    if value is None or not value.strip():
        return None
    return value.strip().lower()


@dataclass(frozen=True)
class Settings:
    """
    Snapshot of the environment-driven settings.

    Explicit keyword overrides take precedence over the environment.
    """

    log_level: int
    slow_resolve_ms: int
    max_depth: int
    default_encoder: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        *,
        log_level: Optional[str] = None,
        slow_resolve_ms: Optional[int] = None,
        max_depth: Optional[int] = None,
        default_encoder: Optional[str] = None,
    ) -> "Settings":
        return cls(
            log_level=resolve_log_level(log_level),
            slow_resolve_ms=resolve_slow_resolve_ms(override=slow_resolve_ms),
            max_depth=resolve_max_depth(override=max_depth),
            default_encoder=resolve_default_encoder_name(default_encoder),
        )

"""Logging helpers for vtag."""

from __future__ import annotations

import logging
import time
from typing import Optional

from ..config import resolve_log_level

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[int | str] = None) -> None:
    logger = logging.getLogger("vtag")
    if logger.handlers:
        return
    if level is None:
        level = resolve_log_level()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"vtag.{name}")


def time_call(name: str, logger: logging.Logger, *, record: str | None = None, threshold_ms: float = 50):
    start = time.monotonic()

    class Timer:
        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            elapsed_ms = (time.monotonic() - start) * 1000
            level = logging.WARNING if elapsed_ms >= threshold_ms else logging.DEBUG
            extra = {"record_type": record, "elapsed_ms": elapsed_ms}
            logger.log(level, "%s took %.2fms", name, elapsed_ms, extra=extra)

    return Timer()

"""
Construction helpers and the process-wide default resolver.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..cache import InMemoryCache
from ..config import resolve_default_encoder_name
from ..core.fields import DEFAULT_TAG_KEY
from ..utils import get_logger
from .encoders import EncoderFunc, get_encoder
from .resolver import TagEncoder

logger = get_logger("registry")

_default_encoder: Optional[TagEncoder] = None
_default_lock = threading.Lock()


def new_encoder(
    tag: str = "",
    encoder: Optional[EncoderFunc] = None,
    cache: bool = False,
    *,
    max_depth: Optional[int] = None,
) -> TagEncoder:
    """
    Build a standalone resolver configuration.

    An empty ``tag`` selects the default annotation key (``"vtag"``). When
    ``cache`` is true the configuration gets its own in-memory cache.
    Nothing global is touched.
    """
    return TagEncoder(
        tag or DEFAULT_TAG_KEY,
        encoder,
        InMemoryCache() if cache else None,
        max_depth=max_depth,
    )


def _install_default(build: Callable[[], TagEncoder]) -> tuple[TagEncoder, bool]:
    global _default_encoder
    current = _default_encoder
    if current is not None:
        return current, False
    with _default_lock:
        if _default_encoder is None:
            _default_encoder = build()
            return _default_encoder, True
        return _default_encoder, False


def init_encoder(encoder: EncoderFunc) -> None:
    """
    Install ``encoder`` on the process-wide default configuration.

    Only the first initialisation (explicit or lazy) takes effect; later
    calls leave the established default untouched.
    """
    _, installed = _install_default(lambda: new_encoder("", encoder, True))
    if installed:
        logger.debug("Default encoder initialised with %s", getattr(encoder, "__name__", encoder))
    else:
        logger.debug("Default encoder already initialised; ignoring %s", getattr(encoder, "__name__", encoder))


def _build_from_env() -> TagEncoder:
    name = resolve_default_encoder_name()
    encoder = get_encoder(name) if name else None
    return new_encoder("", encoder, True)


def get_default_encoder() -> TagEncoder:
    default, installed = _install_default(_build_from_env)
    if installed:
        logger.debug("Default encoder built lazily: %r", default)
    return default


def slice_with_tag(obj: Any, prefix: str = "", *labels: str) -> List[str]:
    """Resolve tagged field names using the process-wide default configuration."""
    return get_default_encoder().slice_with_tag(obj, prefix, *labels)


def names_to_set(names: Iterable[str], value: Any = None) -> Dict[str, Any]:
    return {name: value for name in names}

"""
Field walker resolving tagged record fields into external names.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..cache import NameCache, NoOpCache
from ..config import resolve_max_depth, resolve_slow_resolve_ms
from ..core.fields import DEFAULT_TAG_KEY, EXCLUDE_SENTINEL
from ..core.introspection import (
    RecordType,
    describe,
    is_record_type,
    is_type_like,
    strip_optional,
    type_identity,
    unwrap_optional,
)
from ..errors import RecordDepthError, UnsupportedKindError
from ..utils import get_logger, time_call
from .encoders import EncoderFunc

CacheKey = Tuple[Any, str, Tuple[str, ...]]


def _join(prefix: str, name: str) -> str:
    if prefix:
        return f"{prefix}.{name}"
    return name


def _has_intersection(requested: Iterable[str], labels: Sequence[str]) -> bool:
    return any(label in labels for label in requested)


class TagEncoder:
    """
    Resolver configuration: annotation key, naming encoder and cache.

    Instances are immutable once built. Use
    :func:`vtag.encoding.registry.new_encoder` for the common construction
    path.

    Record types must be acyclic; nesting deeper than ``max_depth`` raises
    :class:`~vtag.errors.RecordDepthError`.
    """

    def __init__(
        self,
        tag: str = DEFAULT_TAG_KEY,
        encoder: Optional[EncoderFunc] = None,
        cache: Optional[NameCache] = None,
        *,
        max_depth: Optional[int] = None,
        slow_resolve_ms: Optional[int] = None,
    ) -> None:
        self._tag = tag or DEFAULT_TAG_KEY
        self._encoder = encoder
        self._cache: NameCache = cache if cache is not None else NoOpCache()
        self._max_depth = resolve_max_depth(override=max_depth)
        self._slow_resolve_ms = resolve_slow_resolve_ms(override=slow_resolve_ms)
        self.logger = get_logger("resolver")

    def __repr__(self) -> str:
        encoder = getattr(self._encoder, "__name__", None)
        return f"<TagEncoder tag={self._tag!r} encoder={encoder} caching={self.caching}>"

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def encoder(self) -> Optional[EncoderFunc]:
        return self._encoder

    @property
    def cache(self) -> NameCache:
        return self._cache

    @property
    def caching(self) -> bool:
        return not isinstance(self._cache, NoOpCache)

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def slice_with_tag(self, obj: Any, prefix: str = "", *labels: str) -> List[str]:
        """
        Return the external names of ``obj``'s fields tagged with any of
        ``labels``, in declaration order.

        ``obj`` may be a record class, an ``Optional[...]`` of one, or a
        record instance. Nested records are flattened using the parent's
        name as a dotted prefix; embedded records contribute their fields
        with the current prefix.
        """
        return self._resolve(obj, prefix, tuple(labels), 0)

    # Internal helpers ------------------------------------------------------
    def _resolve(self, obj: Any, prefix: str, labels: Tuple[str, ...], depth: int) -> List[str]:
        tp = obj if is_type_like(obj) else type(obj)
        identity = type_identity(tp)
        key: CacheKey = (tp, prefix, labels)
        cached = self._cache.get(key)
        if cached is not None:
            return list(cached)

        if depth > self._max_depth:
            raise RecordDepthError(identity, self._max_depth)

        record = describe(unwrap_optional(tp))
        if depth == 0:
            with time_call("slice_with_tag", self.logger, record=identity, threshold_ms=self._slow_resolve_ms):
                names = self._walk(record, prefix, labels, depth)
        else:
            names = self._walk(record, prefix, labels, depth)

        self._cache.set(key, names)
        return names

    def _resolve_subtree(self, tp: Any, prefix: str, labels: Tuple[str, ...], depth: int) -> List[str]:
        try:
            return self._resolve(tp, prefix, labels, depth)
        except UnsupportedKindError as exc:
            # A subtree that cannot be walked contributes no names.
            self.logger.debug(
                "Skipping unsupported subtree at prefix '%s': %s",
                prefix,
                exc,
                extra={"kind": exc.kind},
            )
            return []

    def _walk(self, record: RecordType, prefix: str, labels: Tuple[str, ...], depth: int) -> List[str]:
        names: List[str] = []
        for field in record.fields:
            if field.embedded:
                names.extend(self._resolve_subtree(field.type, prefix, labels, depth + 1))
                continue
            if not field.exported:
                continue

            parts = field.tag(self._tag).split(",")
            explicit = parts[0]
            if explicit == EXCLUDE_SENTINEL:
                continue
            if not _has_intersection(labels, parts[1:]):
                continue

            if explicit:
                name = _join(prefix, explicit)
            elif self._encoder is not None:
                name = self._encoder(field.tags, prefix, field.name)
                if not name:
                    continue
            else:
                name = _join(prefix, field.name)

            target = strip_optional(field.type)
            if is_record_type(target):
                names.extend(self._resolve_subtree(target, name, labels, depth + 1))
                continue
            names.append(name)
        return names

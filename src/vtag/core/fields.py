"""
Field definitions and tag helpers for vtag records.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Mapping, Optional, cast

from ..errors import FieldError

if TYPE_CHECKING:
    from .record import Record

DEFAULT_TAG_KEY = "vtag"
EXCLUDE_SENTINEL = "-"

# Keys used inside ``dataclasses.field(metadata=...)``.
TAGS_METADATA = "vtag.tags"
EMBEDDED_METADATA = "vtag.embedded"


def _build_tags(tag: Optional[str], key: str, tags: Optional[Mapping[str, str]]) -> dict[str, str]:
    combined = dict(tags or {})
    if tag is not None:
        combined[key] = tag
    return combined


class Field:
    """
    Declarative field descriptor for :class:`~vtag.core.record.Record`.

    ``tag`` is the annotation metadata stored under ``key`` (``"vtag"`` by
    default): an optional explicit name followed by comma-separated labels,
    e.g. ``"name,list,detail"`` or ``",list"``. Further annotation keys can
    be passed through ``tags``. ``embedded`` promotes the fields of
    ``type_`` into the owning record.
    """

    _creation_counter = 0

    def __init__(
        self,
        type_: Any = str,
        tag: Optional[str] = None,
        *,
        key: str = DEFAULT_TAG_KEY,
        tags: Optional[Mapping[str, str]] = None,
        embedded: bool = False,
        default: Any = None,
        help_text: Optional[str] = None,
    ) -> None:
        self.type = type_
        self.tags = _build_tags(tag, key, tags)
        self.embedded = embedded
        self.default = default
        self.help_text = help_text

        self.record: type["Record"] | None = None  # Set during contribute_to_class
        self.name: str | None = None
        self.creation_counter = Field._creation_counter
        Field._creation_counter += 1

    # Descriptor protocol -------------------------------------------------
    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self

        record = cast("Record", instance)
        name = self.require_name()
        if name not in record._field_values:
            default = self.get_default()
            record._field_values[name] = default
            return default
        return record._field_values[name]

    def __set__(self, instance: object, value: Any) -> None:
        record = cast("Record", instance)
        record._field_values[self.require_name()] = value

    # Metadata helpers ----------------------------------------------------
    def contribute_to_class(self, record: type["Record"], name: str) -> None:
        """
        Attach the field to the record class as a descriptor.
        """
        self.record = record
        self.name = name
        setattr(record, name, self)

    def require_name(self) -> str:
        if self.name is None:
            raise FieldError("Field name is not set.")
        return self.name

    def get_default(self) -> Any:
        if callable(self.default):
            return self.default()
        return self.default

    def tag(self, key: str = DEFAULT_TAG_KEY) -> str:
        return self.tags.get(key, "")

    def clone(self) -> "Field":
        cloned = self.__class__(
            self.type,
            tags=dict(self.tags),
            embedded=self.embedded,
            default=self.default,
            help_text=self.help_text,
        )
        return cloned

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name or '?'} tags={self.tags!r}>"


# Dataclass helpers -------------------------------------------------------
def tagged(
    tag: Optional[str] = None,
    *,
    key: str = DEFAULT_TAG_KEY,
    tags: Optional[Mapping[str, str]] = None,
    **kwargs: Any,
) -> Any:
    """
    Build a ``dataclasses.field`` carrying vtag annotation metadata.

    Remaining keyword arguments are forwarded to :func:`dataclasses.field`.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAGS_METADATA] = _build_tags(tag, key, tags)
    return dataclasses.field(metadata=metadata, **kwargs)


def embedded(**kwargs: Any) -> Any:
    """Mark a dataclass field as embedded."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[EMBEDDED_METADATA] = True
    return dataclasses.field(metadata=metadata, **kwargs)

"""
Declarative record base class for vtag.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Type

from ..errors import RecordConfigurationError
from .fields import Field


@dataclass
class RecordOptions:
    """
    Container for record metadata calculated by :class:`RecordMeta`.
    """

    record: Type["Record"]
    name: str = ""
    fields: "OrderedDict[str, Field]" = field(default_factory=OrderedDict)

    def add_field(self, field_obj: Field) -> None:
        if field_obj.name in self.fields:
            raise RecordConfigurationError(
                f"Duplicate field name '{field_obj.name}' on record '{self.record.__name__}'"
            )
        self.fields[field_obj.require_name()] = field_obj

    def get_field(self, name: str) -> Field:
        try:
            return self.fields[name]
        except KeyError as exc:
            raise KeyError(f"Unknown field '{name}' on record '{self.record.__name__}'") from exc

    def get_fields(self) -> Iterable[Field]:
        return self.fields.values()


class RecordMeta(type):
    """
    Metaclass collecting declared fields in declaration order.

    Fields declared on record base classes come first, followed by the
    fields declared on the class itself.
    """

    def __new__(mcls, name: str, bases: tuple[type, ...], attrs: Dict[str, Any]) -> "RecordMeta":
        declared_fields: Dict[str, Field] = {}
        for attr_name, value in list(attrs.items()):
            if isinstance(value, Field):
                declared_fields[attr_name] = attrs.pop(attr_name)

        cls = super().__new__(mcls, name, bases, attrs)

        meta = attrs.get("Meta")
        record_name = getattr(meta, "name", name) if meta else name
        options = RecordOptions(record=cls, name=record_name)

        for base in reversed(cls.__mro__[1:]):
            base_options: Optional[RecordOptions] = base.__dict__.get("_meta")
            if base_options is None:
                continue
            for inherited in base_options.get_fields():
                if inherited.name in options.fields:
                    continue
                copied = inherited.clone()
                copied.contribute_to_class(cls, inherited.require_name())
                options.add_field(copied)

        sorted_fields = sorted(declared_fields.items(), key=lambda item: item[1].creation_counter)
        for attr_name, field_obj in sorted_fields:
            field_obj.contribute_to_class(cls, attr_name)
            if attr_name in options.fields:
                # Overrides keep the inherited position.
                options.fields[attr_name] = field_obj
                continue
            options.add_field(field_obj)

        cls._meta = options
        return cls


class Record(metaclass=RecordMeta):
    """
    Base class for declaratively tagged records.

    Example::

        class Student(Record):
            Name = Field(str, "name,list,detail")
            Age = Field(int, "age,list,detail")
    """

    _meta: RecordOptions

    def __init__(self, **kwargs: Any) -> None:
        self._field_values: Dict[str, Any] = {}
        for name, value in kwargs.items():
            if name not in self._meta.fields:
                raise TypeError(f"{self.__class__.__name__}() got an unexpected field '{name}'")
            setattr(self, name, value)

    def __repr__(self) -> str:
        field_parts = ", ".join(
            f"{name}={self._field_values[name]!r}"
            for name in self._meta.fields
            if name in self._field_values
        )
        return f"<{self.__class__.__name__} {field_parts}>"

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self._meta.fields}

"""
Error hierarchy for vtag.
"""

from __future__ import annotations

from typing import Any


class VtagError(Exception):
    """Base error for vtag failures."""


class UnsupportedKindError(VtagError, TypeError):
    """Raised when a resolved type is not a record."""

    def __init__(self, kind: str, type_: Any = None) -> None:
        self.kind = kind
        self.type = type_
        super().__init__(f"type: {kind}, not supported")


class RecordDepthError(VtagError, RecursionError):
    """Raised when record nesting exceeds the configured depth guard."""

    def __init__(self, record: str, max_depth: int) -> None:
        self.record = record
        self.max_depth = max_depth
        super().__init__(
            f"Record '{record}' nests deeper than {max_depth} levels; "
            "record types must not be cyclic."
        )


class UnknownEncoderError(VtagError, KeyError):
    """Raised when an encoder name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown encoder '{self.name}'"


class FieldError(VtagError):
    """Raised for declarative field configuration issues."""


class RecordConfigurationError(VtagError):
    """Raised when a record class is misconfigured."""


class ConfigurationError(VtagError, ValueError):
    """Raised when an environment setting cannot be parsed."""

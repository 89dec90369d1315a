"""Cache backends for vtag."""

from .backends import InMemoryCache, NameCache, NoOpCache

__all__ = ["InMemoryCache", "NameCache", "NoOpCache"]

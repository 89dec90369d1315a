"""Name-list cache backends."""

from __future__ import annotations

from threading import RLock
from typing import Dict, Hashable, Optional, Protocol, Sequence, Tuple


class NameCache(Protocol):
    def get(self, key: Hashable) -> Optional[Tuple[str, ...]]: ...

    def set(self, key: Hashable, names: Sequence[str]) -> None: ...

    def clear(self) -> None: ...

    def __len__(self) -> int: ...


class NoOpCache:
    def get(self, key: Hashable) -> Optional[Tuple[str, ...]]:
        return None

    def set(self, key: Hashable, names: Sequence[str]) -> None:
        return None

    def clear(self) -> None:
        return None

    def __len__(self) -> int:
        return 0


class InMemoryCache:
    """
    Unbounded name-list cache safe for concurrent use.

    Entries are stored as tuples so callers cannot mutate a shared entry.
    """

    def __init__(self) -> None:
        self._store: Dict[Hashable, Tuple[str, ...]] = {}
        self._lock = RLock()

    def get(self, key: Hashable) -> Optional[Tuple[str, ...]]:
        with self._lock:
            return self._store.get(key)

    def set(self, key: Hashable, names: Sequence[str]) -> None:
        with self._lock:
            self._store[key] = tuple(names)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

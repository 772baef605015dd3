"""Concurrency-safe mapping used by the process-wide registries.

Readers work on an immutable snapshot and never take a lock; writers are
serialized by a per-map lock and publish a new snapshot with a single
reference swap.
"""

import threading
from types import MappingProxyType
from typing import Callable, Dict, Generic, Iterator, Mapping, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class ConcurrentMap(Generic[K, V]):
    """Copy-on-write mapping with an atomic insert-if-absent primitive."""

    def __init__(self, initial: Optional[Mapping[K, V]] = None) -> None:
        self._data: Mapping[K, V] = MappingProxyType(dict(initial or {}))
        self._write_lock = threading.Lock()

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._data.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def snapshot(self) -> Mapping[K, V]:
        """Return a read-only view of the current contents."""
        return self._data

    def insert_if_absent(self, key: K, factory: Callable[[], V]) -> Tuple[V, bool]:
        """Atomically insert ``factory()`` under ``key`` unless present.

        ``factory`` is only called when the key is absent, while holding the
        write lock, so it runs at most once per successful insertion.

        Returns:
            ``(value, inserted)``: the value now stored under ``key`` and
            whether this call inserted it.
        """
        current = self._data
        if key in current:
            return current[key], False
        with self._write_lock:
            current = self._data
            if key in current:
                return current[key], False
            value = factory()
            updated: Dict[K, V] = dict(current)
            updated[key] = value
            self._data = MappingProxyType(updated)
            return value, True

    def replace_all(self, mapping: Mapping[K, V]) -> None:
        """Replace the entire contents with a copy of ``mapping``."""
        replacement = MappingProxyType(dict(mapping))
        with self._write_lock:
            self._data = replacement

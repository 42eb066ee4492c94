"""Per-key mutual exclusion for read-modify-write sequences."""

import threading
from collections.abc import Hashable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field


@dataclass
class _LockEntry:
    lock: threading.Lock = field(default_factory=threading.Lock)
    users: int = 0


@dataclass
class KeyedLocks:
    """Hands out one lock per key and forgets it once nobody needs it.

    The locks are process-local. Deployments running several worker processes
    still rely on the store's conditional updates for cross-process safety.
    """

    _guard: threading.Lock = field(default_factory=threading.Lock)
    _entries: dict[Hashable, _LockEntry] = field(default_factory=dict)

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        """Block until the lock for ``key`` is acquired and hold it."""
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                entry = _LockEntry()
                self._entries[key] = entry
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._guard:
                entry.users -= 1
                if entry.users == 0:
                    self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)

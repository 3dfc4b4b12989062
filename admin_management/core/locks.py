"""In-process keyed locks.

Serializes work on the same logical key (a verification code, a
user/purpose pair, an email) while letting different keys run in
parallel. Entries are reference-counted and dropped when idle so the
table does not grow with every code ever confirmed. Cross-process
safety comes from the database (conditional updates, unique indexes).
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class _Entry:
    __slots__ = ("lock", "holders")

    def __init__(self) -> None:
        self.lock = asyncio.Lock()
        self.holders = 0


class KeyedLocks:
    """asyncio.Lock per string key."""

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        """Acquire the lock for key for the duration of the block."""
        entry = self._entries.get(key)
        if entry is None:
            entry = _Entry()
            self._entries[key] = entry
        entry.holders += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.holders -= 1
            if entry.holders == 0:
                self._entries.pop(key, None)

    def __len__(self) -> int:
        return len(self._entries)

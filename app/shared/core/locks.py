"""
Per-aggregate locks for write commands.
A command locks every user and plant it mutates before it opens its
transaction, so two commands touching the same user run one after the other.
"""

import asyncio
import logging
import weakref
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Iterable, List, Tuple

logger = logging.getLogger(__name__)

LockKey = Tuple[str, int]

# Users are always locked before plants
AGGREGATE_ORDER = {"user": 0, "plant": 1}


def _sort_key(key: LockKey) -> Tuple[int, int]:
    kind, aggregate_id = key
    return AGGREGATE_ORDER.get(kind, len(AGGREGATE_ORDER)), aggregate_id


class AggregateLockRegistry:
    """
    Registry of asyncio locks keyed by (aggregate kind, id).

    Locks are acquired in a fixed global order (kind rank, then id) and
    released in reverse, which rules out lock-order deadlocks between
    commands. The locks are not re-entrant: a command takes them once,
    at the start of its unit of work.

    Locks are held weakly: an entry disappears once no command holds or
    waits on it.
    """

    def __init__(self):
        self._locks: "weakref.WeakValueDictionary[LockKey, asyncio.Lock]" = weakref.WeakValueDictionary()

    def lock_for(self, kind: str, aggregate_id: int) -> asyncio.Lock:
        key = (kind, aggregate_id)
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    @staticmethod
    def ordered(keys: Iterable[LockKey]) -> List[LockKey]:
        """Deduplicate lock keys and put them in acquisition order."""
        return sorted({key for key in keys if key[1] is not None}, key=_sort_key)

    @asynccontextmanager
    async def hold(self, keys: Iterable[LockKey]) -> AsyncGenerator[List[LockKey], None]:
        """
        Hold the locks for every key for the duration of the block.

        Args:
            keys: (kind, id) pairs, in any order and possibly repeated

        Yields:
            List[LockKey]: The keys actually held, in acquisition order
        """
        ordered_keys = self.ordered(keys)
        acquired: List[asyncio.Lock] = []
        try:
            for kind, aggregate_id in ordered_keys:
                lock = self.lock_for(kind, aggregate_id)
                await lock.acquire()
                acquired.append(lock)
            if ordered_keys:
                logger.debug(f"Acquired aggregate locks: {ordered_keys}")
            yield ordered_keys
        finally:
            for lock in reversed(acquired):
                lock.release()

    def __len__(self) -> int:
        return len(self._locks)

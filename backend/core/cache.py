# core/cache.py
import time
from typing import Any, Callable, Awaitable, Dict, Optional, Tuple


class MemoCache:
    """
    Append-only memo store. With the defaults (no TTL, no maxsize) entries
    live for the whole process; both bounds are opt-in.
    None is never stored, so a failed lookup stays retryable.
    """

    def __init__(
        self, ttl_seconds: Optional[float] = None, maxsize: Optional[int] = None
    ):
        self.ttl = ttl_seconds or None
        self.maxsize = maxsize or None
        self._store: Dict[str, Tuple[Optional[float], Any]] = {}

    def get(self, key: str):
        rec = self._store.get(key)
        if not rec:
            return None
        exp, val = rec
        if exp is not None and exp < time.time():
            self._store.pop(key, None)
            return None
        return val

    def set(self, key: str, val: Any):
        if val is None:
            return
        if self.maxsize and key not in self._store and len(self._store) >= self.maxsize:
            # simple eviction: pop oldest
            old_key = next(iter(self._store))
            self._store.pop(old_key, None)
        exp = time.time() + self.ttl if self.ttl else None
        self._store[key] = (exp, val)

    async def aget_or_set(self, key: str, creator: Callable[[], Awaitable[Any]]):
        hit = self.get(key)
        if hit is not None:
            return hit
        val = await creator()
        self.set(key, val)
        return val

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._store)

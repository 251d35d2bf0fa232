from __future__ import annotations

import hashlib
import json
import threading
import time
from collections import OrderedDict
from typing import Any

from astrova.config import CACHE_MAX_ITEMS, CACHE_TTL_SEC


def canonical_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, sort_keys=True, separators=(",", ":"), default=str)


def payload_key(value: Any) -> str:
    """Content hash of a JSON-like payload; key order does not matter."""
    return hashlib.sha256(canonical_json(value).encode("utf-8")).hexdigest()


class DerivationCache:
    """Bounded LRU for derived chart views, with optional TTL.

    A view depends only on its payload, so two callers racing on the same
    key store equal values.
    """

    def __init__(self, max_items: int | None = None, default_ttl: int | None = None):
        self._max_items = max(1, max_items if max_items is not None else CACHE_MAX_ITEMS)
        self._default_ttl = default_ttl if default_ttl is not None else CACHE_TTL_SEC
        self._store: OrderedDict[str, tuple[Any, float | None]] = OrderedDict()
        self._lock = threading.RLock()
        self.hits = 0
        self.misses = 0

    @property
    def max_items(self) -> int:
        return self._max_items

    def _now(self) -> float:
        return time.time()

    def _prune_expired_unlocked(self) -> None:
        now = self._now()
        expired_keys = [
            key
            for key, (_value, expires_at) in self._store.items()
            if expires_at is not None and expires_at <= now
        ]
        for key in expired_keys:
            self._store.pop(key, None)

    def _enforce_max_items_unlocked(self) -> None:
        while len(self._store) > self._max_items:
            self._store.popitem(last=False)

    def get(self, key: str):
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                self.misses += 1
                return None
            value, expires_at = entry
            if expires_at is not None and expires_at <= self._now():
                self._store.pop(key, None)
                self.misses += 1
                return None
            self._store.move_to_end(key)
            self.hits += 1
            return value

    def set(self, key: str, value, ttl: int | None = None):
        ttl = self._default_ttl if ttl is None else ttl
        try:
            ttl_int = int(ttl)
        except (TypeError, ValueError):
            ttl_int = 0
        expires_at = self._now() + float(ttl_int) if ttl_int > 0 else None
        with self._lock:
            self._prune_expired_unlocked()
            self._store[key] = (value, expires_at)
            self._store.move_to_end(key)
            self._enforce_max_items_unlocked()

    def clear(self):
        with self._lock:
            self._store.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            self._prune_expired_unlocked()
            return len(self._store)


cache = DerivationCache()

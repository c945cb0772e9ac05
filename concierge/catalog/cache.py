"""
TTL cache for provider snapshots fetched over the network.

Entries are replaced whole, never mutated, so a snapshot handed to a caller
stays valid for the duration of its request.
"""
from __future__ import annotations

import hashlib
import json
import time
from typing import Any

_cache: dict[str, dict[str, Any]] = {}
_hits: int = 0
_misses: int = 0
_DEFAULT_TTL = 300  # 5 minutes


def _make_key(key_dict: dict) -> str:
    normalized = json.dumps(key_dict, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


def cache_get(key_dict: dict, ttl: float = _DEFAULT_TTL) -> Any | None:
    global _hits, _misses
    key = _make_key(key_dict)
    entry = _cache.get(key)
    if entry and time.time() - entry["created_at"] < ttl:
        _hits += 1
        return entry["value"]
    if entry:
        _cache.pop(key, None)
    _misses += 1
    return None


def cache_set(key_dict: dict, value: Any) -> None:
    key = _make_key(key_dict)
    _cache[key] = {"value": value, "created_at": time.time()}


def get_cache_stats() -> dict:
    total = _hits + _misses
    return {
        "size": len(_cache),
        "hits": _hits,
        "misses": _misses,
        "hit_rate": round(_hits / total * 100, 1) if total > 0 else 0.0,
    }


def clear_cache() -> None:
    global _hits, _misses
    _cache.clear()
    _hits = 0
    _misses = 0

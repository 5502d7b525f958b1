"""Memoizing wrapper around AppStoreService."""

import asyncio
import dataclasses
import json
import logging
from typing import Any, Optional

from diskcache import Cache

from ..core.config import settings
from .appstore import AppStoreService

logger = logging.getLogger(__name__)

_MISSING = object()

MEMOIZED_OPERATIONS = (
    "app",
    "app_with_ratings",
    "developer",
    "list_apps",
    "list_apps_detailed",
    "reviews",
    "search",
    "search_ids",
    "suggest",
    "similar",
    "ratings",
    "privacy",
    "version_history",
    "privacy_from_api",
    "version_history_from_api",
)


def _encode(value: Any) -> Any:
    if dataclasses.is_dataclass(value):
        return dataclasses.asdict(value)
    return str(value)


def cache_key(operation: str, args: tuple, kwargs: dict) -> str:
    """Stable key for an operation call: name plus JSON-normalized arguments."""
    return json.dumps([operation, list(args), kwargs], sort_keys=True, default=_encode)


class MemoizedAppStore:
    """Exposes the AppStoreService operations with results memoized.

    Results live for ``max_age`` seconds; once ``max_entries`` results are
    held the oldest one is evicted. Failed calls are not memoized. Without a
    ``directory`` the memo lives in a fresh temporary directory.
    """

    def __init__(self, service: Optional[AppStoreService] = None, max_age: Optional[float] = None,
                 max_entries: Optional[int] = None, directory: Optional[str] = None):
        self.service = service or AppStoreService()
        self.max_age = max_age if max_age is not None else settings.cache_max_age
        self.max_entries = max_entries if max_entries is not None else settings.cache_max_entries
        self.cache = Cache(directory or settings.cache_dir)

    def __getattr__(self, name: str):
        if name not in MEMOIZED_OPERATIONS:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return self._memoized(name)

    def _memoized(self, operation: str):
        method = getattr(self.service, operation)

        async def call(*args, **kwargs):
            key = cache_key(operation, args, kwargs)
            cached = await asyncio.to_thread(self.cache.get, key, _MISSING)
            if cached is not _MISSING:
                logger.debug(f"Memo hit for {operation}")
                return cached

            result = await method(*args, **kwargs)
            await asyncio.to_thread(self._store, key, result)
            return result

        call.__name__ = operation
        call.__doc__ = method.__doc__
        return call

    def _store(self, key: str, result: Any) -> None:
        self._make_room()
        self.cache.set(key, result, expire=self.max_age)

    def _make_room(self) -> None:
        if len(self.cache) < self.max_entries:
            return
        self.cache.expire()
        # iteration follows insertion order, so the first key is the oldest
        while len(self.cache) >= self.max_entries:
            oldest = next(iter(self.cache))
            self.cache.delete(oldest)

    def clear(self) -> None:
        self.cache.clear()

    def close(self) -> None:
        self.cache.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

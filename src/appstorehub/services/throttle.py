"""Token-bucket request throttling."""

import asyncio
import logging
import time
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class TokenBucket:
    """Token bucket refilled at ``rate`` tokens per second.

    Capacity equals ``rate``, but never less than one token, so a ceiling
    below one request per second still paces at ``1 / rate`` seconds.
    Refill and consume happen under one lock, so concurrent acquisitions are
    served one at a time and the bucket can never be over-drawn. The lock
    belongs to the running event loop and is replaced when the bucket is
    used from a new one; token state carries over.
    """

    def __init__(self, rate: float, clock=time.monotonic):
        if rate <= 0:
            raise ValueError(f"Rate must be positive, got {rate}")
        self.rate = float(rate)
        self.capacity = max(self.rate, 1.0)
        self.tokens = self.capacity
        self._clock = clock
        self._last_refill = clock()
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    def _loop_lock(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self._last_refill
        self.tokens = min(self.capacity, self.tokens + elapsed * self.rate)
        self._last_refill = now

    async def acquire(self) -> None:
        """Wait until a token is available, then consume it."""
        async with self._loop_lock():
            self._refill()
            if self.tokens < 1:
                wait = (1 - self.tokens) / self.rate
                logger.debug(f"Throttling for {wait:.3f}s at {self.rate:g} req/s")
                await asyncio.sleep(wait)
                self._refill()
            self.tokens -= 1


class ThrottleRegistry:
    """One TokenBucket per distinct rate, shared by everyone using this registry."""

    def __init__(self):
        self._buckets: Dict[float, TokenBucket] = {}

    def get(self, rate: float) -> TokenBucket:
        bucket = self._buckets.get(rate)
        if bucket is None:
            bucket = TokenBucket(rate)
            self._buckets[rate] = bucket
        return bucket

    async def acquire(self, rate: Optional[float]) -> None:
        """Consume a token from the bucket for ``rate``; no rate means no throttling."""
        if not rate:
            return
        await self.get(rate).acquire()

    def __len__(self) -> int:
        return len(self._buckets)

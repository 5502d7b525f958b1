"""Tests for the memoizing service wrapper."""

import asyncio
import time

import pytest

from appstorehub.core.errors import NotFoundError
from appstorehub.core.models import RatingsResult, RequestOptions, Suggestion
from appstorehub.services.cache import MemoizedAppStore, cache_key


class CountingService:
    """Records every call that reaches the underlying service."""

    def __init__(self):
        self.calls = []
        self.fail = False

    async def suggest(self, term, country=None, request_options=None, throttle=None):
        self.calls.append(("suggest", term, country))
        if self.fail:
            raise NotFoundError()
        return [Suggestion(term=f"{term} royale")]

    async def ratings(self, id, country=None, request_options=None, throttle=None):
        self.calls.append(("ratings", id, country))
        return RatingsResult(ratings=3, histogram={1: 0, 2: 0, 3: 0, 4: 1, 5: 2})


@pytest.fixture
def service():
    return CountingService()


@pytest.fixture
def memo(service, tmp_path):
    store = MemoizedAppStore(service=service, max_age=60, max_entries=10, directory=str(tmp_path))
    yield store
    store.close()


class TestMemoizedAppStore:
    """Test hits, expiry, eviction and failure handling."""

    def test_repeated_call_is_served_from_memo(self, memo, service):
        first = asyncio.run(memo.suggest("clash"))
        second = asyncio.run(memo.suggest("clash"))

        assert first == second == [Suggestion(term="clash royale")]
        assert len(service.calls) == 1

    def test_different_arguments_are_different_entries(self, memo, service):
        asyncio.run(memo.suggest("clash"))
        asyncio.run(memo.suggest("clash", country="gb"))
        asyncio.run(memo.ratings(1))

        assert len(service.calls) == 3

    def test_entries_expire(self, service, tmp_path):
        with MemoizedAppStore(service=service, max_age=0.05, directory=str(tmp_path)) as memo:
            asyncio.run(memo.suggest("clash"))
            time.sleep(0.1)
            asyncio.run(memo.suggest("clash"))

        assert len(service.calls) == 2

    def test_oldest_entry_is_evicted_when_full(self, service, tmp_path):
        with MemoizedAppStore(service=service, max_entries=2, directory=str(tmp_path)) as memo:
            asyncio.run(memo.suggest("a"))
            asyncio.run(memo.suggest("b"))
            asyncio.run(memo.suggest("c"))
            assert len(memo.cache) == 2

            asyncio.run(memo.suggest("c"))
            assert len(service.calls) == 3

            asyncio.run(memo.suggest("a"))
            assert len(service.calls) == 4

    def test_failures_are_not_memoized(self, memo, service):
        service.fail = True
        with pytest.raises(NotFoundError):
            asyncio.run(memo.suggest("clash"))

        service.fail = False
        assert asyncio.run(memo.suggest("clash")) == [Suggestion(term="clash royale")]
        assert len(service.calls) == 2

    def test_concurrent_calls_on_one_event_loop(self, memo, service):
        async def burst():
            return await asyncio.gather(memo.suggest("a"), memo.suggest("b"), memo.ratings(1))

        first = asyncio.run(burst())
        second = asyncio.run(burst())

        assert first == second
        assert len(service.calls) == 3

    def test_clear(self, memo, service):
        asyncio.run(memo.ratings(1))
        memo.clear()
        asyncio.run(memo.ratings(1))
        assert len(service.calls) == 2

    def test_unknown_attribute(self, memo):
        with pytest.raises(AttributeError):
            memo.lookup

    def test_wrapper_keeps_operation_name(self, memo):
        assert memo.ratings.__name__ == "ratings"


class TestCacheKey:
    """Test key normalization."""

    def test_keyword_order_does_not_matter(self):
        assert cache_key("app", (), {"id": 1, "country": "us"}) == cache_key("app", (), {"country": "us", "id": 1})

    def test_request_options_are_part_of_the_key(self):
        plain = cache_key("app", (1,), {})
        with_options = cache_key("app", (1,), {"request_options": RequestOptions(headers={"A": "b"})})
        assert plain != with_options


if __name__ == "__main__":
    pytest.main([__file__])

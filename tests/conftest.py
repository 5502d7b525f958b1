"""Shared fixtures for the appstorehub tests."""

import pytest


class FakeTransport:
    """Stands in for Transport: answers by URL substring and records every call."""

    def __init__(self, responses=None):
        self.responses = list((responses or {}).items())
        self.calls = []

    def add(self, url_part, body):
        self.responses.append((url_part, body))

    async def fetch(self, url, headers=None, options=None, limit=None):
        self.calls.append({"url": url, "headers": headers or {}, "options": options, "limit": limit})
        for url_part, body in self.responses:
            if url_part in url:
                if isinstance(body, Exception):
                    raise body
                return body
        raise AssertionError(f"Unexpected request to {url}")

    def urls(self):
        return [call["url"] for call in self.calls]


@pytest.fixture
def fake_transport():
    return FakeTransport()

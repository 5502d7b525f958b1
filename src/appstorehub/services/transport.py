"""HTTP transport: one request per call, throttled, typed failures."""

import asyncio
import logging
from typing import Dict, Optional

import requests

from ..core.config import settings
from ..core.errors import HttpError
from ..core.models import RequestOptions
from .throttle import ThrottleRegistry

logger = logging.getLogger(__name__)


class Transport:
    """Issues storefront requests and returns the raw body as text.

    The blocking ``requests`` call runs in a worker thread, so concurrent
    callers on the event loop are not held up by each other's I/O. Parsing the
    body is left to the caller.
    """

    def __init__(self, throttle: Optional[ThrottleRegistry] = None,
                 base_headers: Optional[Dict[str, str]] = None):
        self.throttle = throttle or ThrottleRegistry()
        self.base_headers = base_headers if base_headers is not None else {"User-Agent": settings.user_agent}

    def _merge_headers(self, headers: Optional[Dict[str, str]], options: RequestOptions) -> Dict[str, str]:
        merged = dict(self.base_headers)
        merged.update(headers or {})
        merged.update(options.headers)
        return merged

    async def fetch(self, url: str, headers: Optional[Dict[str, str]] = None,
                    options: Optional[RequestOptions] = None,
                    limit: Optional[float] = None) -> str:
        """Fetch ``url`` and return the response body.

        Args:
            url: Fully built request URL.
            headers: Call-site headers; override the base headers.
            options: Method, timeout and headers that override everything else.
            limit: Requests per second for this call's throttle bucket, or None.

        Raises:
            HttpError: On any non-2xx status.
        """
        options = options or RequestOptions()
        await self.throttle.acquire(limit)

        timeout = options.timeout if options.timeout is not None else settings.request_timeout
        logger.debug(f"{options.method} {url}")
        response = await asyncio.to_thread(
            requests.request,
            options.method,
            url,
            headers=self._merge_headers(headers, options),
            timeout=timeout,
        )

        if not 200 <= response.status_code < 300:
            logger.debug(f"{options.method} {url} failed with status {response.status_code}")
            raise HttpError(response.status_code)

        return response.text

"""Two-step access to the storefront's bearer-token catalog API."""

import logging
from typing import Callable, Optional, TypeVar

from ..core.constants import Endpoints
from ..core.errors import AuthTokenNotFoundError
from ..core.models import RequestOptions
from ..parsers.extractors import TOKEN_EXTRACTOR, PatternExtractor
from .transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TokenGate:
    """Scrapes a bearer token from an app page, then calls the catalog API with it.

    The token fetch and the authenticated fetch run strictly in sequence; if
    no token is found the second request is never made.
    """

    def __init__(self, transport: Transport, token_extractor: PatternExtractor = TOKEN_EXTRACTOR):
        self.transport = transport
        self.token_extractor = token_extractor

    async def fetch_token(self, app_id, country: str,
                          options: Optional[RequestOptions] = None,
                          limit: Optional[float] = None) -> str:
        url = Endpoints.APP_PAGE_URL.format(country=country, id=app_id)
        html = await self.transport.fetch(url, options=options, limit=limit)
        token = self.token_extractor.first(html)
        if token is None:
            logger.warning(f"No catalog API token in storefront page for app {app_id}")
            raise AuthTokenNotFoundError()
        return token

    async def fetch(self, app_id, country: str, query: str, parse: Callable[[str], T],
                    options: Optional[RequestOptions] = None,
                    limit: Optional[float] = None) -> T:
        """Run both steps and hand the API body to ``parse``.

        Args:
            app_id: Numeric App Store id.
            country: Storefront country code.
            query: Query string for the catalog endpoint (without ``?``).
            parse: Projection from the API body to the result entity.
        """
        token = await self.fetch_token(app_id, country, options, limit)
        url = f"{Endpoints.CATALOG_API_URL.format(country=country, id=app_id)}?{query}"
        body = await self.transport.fetch(
            url,
            headers={
                "Origin": Endpoints.STOREFRONT_ORIGIN,
                "Authorization": f"Bearer {token}",
            },
            options=options,
            limit=limit,
        )
        return parse(body)

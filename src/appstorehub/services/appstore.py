"""App Store data collection service for appstorehub."""

import logging
from typing import List, Optional, Union
from urllib.parse import quote, urlencode

from ..core.config import settings
from ..core.constants import (
    Category,
    Collection,
    DEFAULT_STORE_ID,
    Endpoints,
    LimitConstants,
    MARKETS,
    Sort,
    StoreFrontCodes,
    values_of,
)
from ..core.errors import NotFoundError
from ..core.models import (
    App,
    AppWithRatings,
    ListApp,
    PrivacyDetails,
    RatingsResult,
    RequestOptions,
    Review,
    Suggestion,
    VersionHistoryEntry,
)
from ..parsers.catalog import parse_lookup
from ..parsers.catalog_api import parse_privacy_payload, parse_version_history_payload
from ..parsers.document import parse_privacy, parse_ratings, parse_version_history
from ..parsers.feed import list_feed_ids, parse_list_feed, parse_reviews_feed
from ..parsers.plist import parse_suggestions
from ..parsers.search import paginate, parse_search_ids, parse_similar_ids
from .token_gate import TokenGate
from .transport import Transport

logger = logging.getLogger(__name__)

AppId = Union[int, str]

PRIVACY_API_QUERY = "platform=web&fields=privacyDetails"
VERSION_HISTORY_API_QUERY = (
    "platform=web&extend=versionHistory"
    "&additionalPlatforms=appletv,ipad,iphone,mac,realityDevice"
)


def store_id(country: Optional[str] = None) -> int:
    """Store front id for a two-letter country code (US when unknown)."""
    if not country:
        return DEFAULT_STORE_ID
    return MARKETS.get(country.upper(), DEFAULT_STORE_ID)


def store_front(country: Optional[str], code: str) -> dict:
    return {"X-Apple-Store-Front": f"{store_id(country)},{code}"}


class AppStoreService:
    """Caller-facing App Store operations.

    Each operation builds one request (two for the token-gated API), sends
    it through the shared Transport and hands the body to the matching
    parser. ``throttle`` is a requests-per-second ceiling; calls passing the
    same ceiling share one token bucket.
    """

    def __init__(self, transport: Optional[Transport] = None, token_gate: Optional[TokenGate] = None):
        self.transport = transport or Transport()
        self.token_gate = token_gate or TokenGate(self.transport)

    # ---- lookup-backed operations ----

    async def lookup(self, ids: List[AppId], id_field: str = "id", country: Optional[str] = None,
                     lang: Optional[str] = None, request_options: Optional[RequestOptions] = None,
                     throttle: Optional[float] = None) -> List[App]:
        """Look up apps by track id or bundle id (``id_field="bundleId"``)."""
        params = {
            id_field: ",".join(str(i) for i in ids),
            "country": country or settings.default_country,
            "entity": "software",
        }
        lang = lang or settings.default_lang
        if lang:
            params["lang"] = lang
        url = f"{Endpoints.LOOKUP_URL}?{urlencode(params, safe=',')}"
        body = await self.transport.fetch(url, options=request_options, limit=throttle)
        return parse_lookup(body)

    async def app(self, id: Optional[AppId] = None, app_id: Optional[str] = None,
                  country: Optional[str] = None, lang: Optional[str] = None,
                  request_options: Optional[RequestOptions] = None,
                  throttle: Optional[float] = None) -> App:
        """Fetch one app by numeric ``id`` or by bundle ``app_id``."""
        if not id and not app_id:
            raise ValueError("Either id or app_id is required")

        if id:
            results = await self.lookup([id], "id", country, lang, request_options, throttle)
        else:
            results = await self.lookup([app_id], "bundleId", country, lang, request_options, throttle)

        if not results:
            raise NotFoundError()
        return results[0]

    async def app_with_ratings(self, id: Optional[AppId] = None, app_id: Optional[str] = None,
                               country: Optional[str] = None, lang: Optional[str] = None,
                               request_options: Optional[RequestOptions] = None,
                               throttle: Optional[float] = None) -> AppWithRatings:
        """Fetch one app together with its ratings histogram."""
        app = await self.app(id, app_id, country, lang, request_options, throttle)
        ratings = await self.ratings(id or app.id, country, request_options, throttle)
        return AppWithRatings(app=app, ratings=ratings)

    async def developer(self, dev_id: AppId, country: Optional[str] = None, lang: Optional[str] = None,
                        request_options: Optional[RequestOptions] = None,
                        throttle: Optional[float] = None) -> List[App]:
        """All apps published by a developer (artist) id."""
        if not dev_id:
            raise ValueError("dev_id is required")
        apps = await self.lookup([dev_id], "id", country, lang, request_options, throttle)
        if not apps:
            raise NotFoundError("Developer not found (404)")
        logger.info(f"Found {len(apps)} apps for developer {dev_id}")
        return apps

    # ---- feed-backed operations ----

    def _list_url(self, collection: Optional[str], category: Optional[int], num: int,
                  country: Optional[str]) -> str:
        if category and category not in values_of(Category):
            raise ValueError(f"Invalid category {category}")
        collection = collection or Collection.TOP_FREE_IOS
        if collection not in values_of(Collection):
            raise ValueError(f"Invalid collection {collection}")
        if num > LimitConstants.MAX_LIST_NUM:
            raise ValueError(f"Cannot retrieve more than {LimitConstants.MAX_LIST_NUM} apps")

        return Endpoints.LIST_URL.format(
            collection=collection,
            category=f"genre={category}/" if category else "",
            num=num,
            store=store_id(country or settings.default_country),
        )

    async def list_apps(self, collection: Optional[str] = None, category: Optional[int] = None,
                        num: int = LimitConstants.DEFAULT_LIST_NUM, country: Optional[str] = None,
                        request_options: Optional[RequestOptions] = None,
                        throttle: Optional[float] = None) -> List[ListApp]:
        """Chart entries as they appear in the RSS feed."""
        url = self._list_url(collection, category, num, country)
        body = await self.transport.fetch(url, options=request_options, limit=throttle)
        return parse_list_feed(body)

    async def list_apps_detailed(self, collection: Optional[str] = None, category: Optional[int] = None,
                                 num: int = LimitConstants.DEFAULT_LIST_NUM, country: Optional[str] = None,
                                 lang: Optional[str] = None,
                                 request_options: Optional[RequestOptions] = None,
                                 throttle: Optional[float] = None) -> List[App]:
        """Chart entries resolved to full App records through the lookup endpoint."""
        url = self._list_url(collection, category, num, country)
        body = await self.transport.fetch(url, options=request_options, limit=throttle)
        ids = list_feed_ids(body)
        if not ids:
            return []
        return await self.lookup(ids, "id", country, lang, request_options, throttle)

    async def reviews(self, id: Optional[AppId] = None, app_id: Optional[str] = None,
                      sort: str = Sort.RECENT, page: int = 1, country: Optional[str] = None,
                      request_options: Optional[RequestOptions] = None,
                      throttle: Optional[float] = None) -> List[Review]:
        """One page of customer reviews."""
        if not id and not app_id:
            raise ValueError("Either id or app_id is required")
        if sort not in values_of(Sort):
            raise ValueError(f"Invalid sort {sort}")
        if page < LimitConstants.MIN_REVIEWS_PAGE:
            raise ValueError(f"Page cannot be lower than {LimitConstants.MIN_REVIEWS_PAGE}")
        if page > LimitConstants.MAX_REVIEWS_PAGE:
            raise ValueError(f"Page cannot be greater than {LimitConstants.MAX_REVIEWS_PAGE}")

        if not id:
            id = (await self.app(app_id=app_id, country=country,
                                 request_options=request_options, throttle=throttle)).id

        url = Endpoints.REVIEWS_URL.format(
            country=country or settings.default_country, page=page, id=id, sort=sort,
        )
        body = await self.transport.fetch(url, options=request_options, limit=throttle)
        reviews = parse_reviews_feed(body)
        logger.info(f"Retrieved {len(reviews)} reviews for app {id} (page {page})")
        return reviews

    # ---- search ----

    async def search_ids(self, term: str, num: int = LimitConstants.DEFAULT_SEARCH_NUM, page: int = 1,
                         country: Optional[str] = None, lang: Optional[str] = None,
                         request_options: Optional[RequestOptions] = None,
                         throttle: Optional[float] = None) -> List[str]:
        """Ids of one page of search results."""
        if not term:
            raise ValueError("term is required")
        headers = store_front(country or settings.default_country, StoreFrontCodes.SEARCH)
        headers["Accept-Language"] = lang or "en-us"
        body = await self.transport.fetch(
            Endpoints.SEARCH_URL + quote(term, safe=""),
            headers=headers,
            options=request_options,
            limit=throttle,
        )
        return paginate(parse_search_ids(body), num, page)

    async def search(self, term: str, num: int = LimitConstants.DEFAULT_SEARCH_NUM, page: int = 1,
                     country: Optional[str] = None, lang: Optional[str] = None,
                     request_options: Optional[RequestOptions] = None,
                     throttle: Optional[float] = None) -> List[App]:
        """One page of search results as full App records."""
        ids = await self.search_ids(term, num, page, country, lang, request_options, throttle)
        if not ids:
            return []
        return await self.lookup(ids, "id", country, lang, request_options, throttle)

    async def suggest(self, term: str, country: Optional[str] = None,
                      request_options: Optional[RequestOptions] = None,
                      throttle: Optional[float] = None) -> List[Suggestion]:
        """Search-term completions for ``term``."""
        if not term:
            raise ValueError("term is required")
        body = await self.transport.fetch(
            Endpoints.SUGGEST_URL + quote(term, safe=""),
            headers=store_front(country or settings.default_country, StoreFrontCodes.SUGGEST),
            options=request_options,
            limit=throttle,
        )
        return parse_suggestions(body)

    async def similar(self, id: Optional[AppId] = None, app_id: Optional[str] = None,
                      country: Optional[str] = None, lang: Optional[str] = None,
                      request_options: Optional[RequestOptions] = None,
                      throttle: Optional[float] = None) -> List[App]:
        """Apps listed as "customers also bought" on the app's page."""
        if not id and not app_id:
            raise ValueError("Either id or app_id is required")
        if not id:
            id = (await self.app(app_id=app_id, country=country, lang=lang,
                                 request_options=request_options, throttle=throttle)).id

        text = await self.transport.fetch(
            f"{Endpoints.SIMILAR_URL}{id}",
            headers=store_front(country or settings.default_country, StoreFrontCodes.SIMILAR),
            options=request_options,
            limit=throttle,
        )
        ids = parse_similar_ids(text)
        if not ids:
            return []
        return await self.lookup(ids, "id", country, lang, request_options, throttle)

    # ---- scraped pages ----

    async def _page(self, url: str, headers: Optional[dict], request_options: Optional[RequestOptions],
                    throttle: Optional[float]) -> str:
        html = await self.transport.fetch(url, headers=headers, options=request_options, limit=throttle)
        if not html:
            raise NotFoundError()
        return html

    async def ratings(self, id: AppId, country: Optional[str] = None,
                      request_options: Optional[RequestOptions] = None,
                      throttle: Optional[float] = None) -> RatingsResult:
        """Total rating count and per-star histogram."""
        if not id:
            raise ValueError("id is required")
        country = country or settings.default_country
        html = await self._page(
            Endpoints.RATINGS_URL.format(country=country, id=id),
            store_front(country, StoreFrontCodes.RATINGS),
            request_options,
            throttle,
        )
        return parse_ratings(html)

    async def privacy(self, id: AppId, country: Optional[str] = None,
                      request_options: Optional[RequestOptions] = None,
                      throttle: Optional[float] = None) -> PrivacyDetails:
        """Privacy labels scraped from the app page."""
        if not id:
            raise ValueError("id is required")
        url = Endpoints.APP_PAGE_URL.format(country=country or settings.default_country, id=id)
        html = await self._page(f"{url}?see-all=privacy", None, request_options, throttle)
        return parse_privacy(html)

    async def version_history(self, id: AppId, country: Optional[str] = None,
                              request_options: Optional[RequestOptions] = None,
                              throttle: Optional[float] = None) -> List[VersionHistoryEntry]:
        """Release history scraped from the app page."""
        if not id:
            raise ValueError("id is required")
        url = Endpoints.APP_PAGE_URL.format(country=country or settings.default_country, id=id)
        html = await self._page(f"{url}?see-all=version-history", None, request_options, throttle)
        return parse_version_history(html)

    # ---- token-gated catalog API ----

    async def privacy_from_api(self, id: AppId, country: Optional[str] = None,
                               request_options: Optional[RequestOptions] = None,
                               throttle: Optional[float] = None) -> PrivacyDetails:
        """Privacy labels from the catalog API (raises AuthTokenNotFoundError without a token)."""
        if not id:
            raise ValueError("id is required")
        return await self.token_gate.fetch(
            id, country or settings.default_country, PRIVACY_API_QUERY,
            parse_privacy_payload, request_options, throttle,
        )

    async def version_history_from_api(self, id: AppId, country: Optional[str] = None,
                                       request_options: Optional[RequestOptions] = None,
                                       throttle: Optional[float] = None) -> List[VersionHistoryEntry]:
        """Release history from the catalog API (raises AuthTokenNotFoundError without a token)."""
        if not id:
            raise ValueError("id is required")
        return await self.token_gate.fetch(
            id, country or settings.default_country, VERSION_HISTORY_API_QUERY,
            parse_version_history_payload, request_options, throttle,
        )

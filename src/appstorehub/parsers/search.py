"""Search bubbles JSON and app-page id lists."""

import json
import logging
from typing import List

from .extractors import SIMILAR_APPS_EXTRACTOR, PatternExtractor

logger = logging.getLogger(__name__)


def paginate(items: List, num: int, page: int) -> List:
    start = num * (page - 1)
    return items[start:start + num]


def parse_search_ids(body: str) -> List[str]:
    """Result ids of the first search bubble, in ranking order."""
    response = json.loads(body)
    bubbles = response.get("bubbles") or []
    if not bubbles:
        return []
    return [str(result["id"]) for result in bubbles[0].get("results") or []]


def parse_similar_ids(text: str, extractor: PatternExtractor = SIMILAR_APPS_EXTRACTOR) -> List[str]:
    """Ids listed under ``customersAlsoBoughtApps`` in an app page, or ``[]``."""
    if "customersAlsoBoughtApps" not in text:
        return []
    fragment = extractor.first(text)
    if fragment is None:
        logger.debug("customersAlsoBoughtApps present but no id list matched")
        return []
    return [str(app_id) for app_id in json.loads(fragment)]

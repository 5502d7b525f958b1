"""Parsers turning upstream documents into appstorehub entities."""

from .catalog import parse_lookup
from .feed import parse_list_feed, parse_reviews_feed
from .document import parse_ratings, parse_privacy, parse_version_history
from .catalog_api import parse_privacy_payload, parse_version_history_payload
from .plist import parse_suggestions
from .search import parse_search_ids, parse_similar_ids

__all__ = [
    "parse_lookup",
    "parse_list_feed",
    "parse_reviews_feed",
    "parse_ratings",
    "parse_privacy",
    "parse_version_history",
    "parse_privacy_payload",
    "parse_version_history_payload",
    "parse_suggestions",
    "parse_search_ids",
    "parse_similar_ids",
]

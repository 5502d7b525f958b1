"""RSS-as-JSON feeds -> ListApp and Review records.

Both the list and the customer-review feeds put their rows under
``feed.entry``, which is an object when the feed has one row, a list when it
has several, and absent when it has none.
"""

import json
import logging
from typing import Any, Dict, List

from ..core.models import ListApp, Review
from .normalize import attribute, ensure_list, label, parse_developer_link, parse_link

logger = logging.getLogger(__name__)


def feed_entries(body: str) -> List[Dict[str, Any]]:
    response = json.loads(body)
    return ensure_list((response.get("feed") or {}).get("entry"))


def clean_list_app(entry: Dict[str, Any]) -> ListApp:
    artist = entry["im:artist"]
    developer_url, developer_id = parse_developer_link(attribute(artist, "href"))
    images = ensure_list(entry.get("im:image"))
    price_node = entry["im:price"]

    return ListApp(
        id=attribute(entry["id"], "im:id"),
        app_id=attribute(entry["id"], "im:bundleId"),
        title=label(entry["im:name"]),
        icon=label(images[-1], "") if images else "",
        url=parse_link(entry.get("link")),
        price=float(attribute(price_node, "amount")),
        currency=attribute(price_node, "currency"),
        description=label(entry.get("summary")),
        developer=label(artist),
        developer_url=developer_url,
        developer_id=developer_id,
        genre=attribute(entry["category"], "label"),
        genre_id=attribute(entry["category"], "im:id"),
        released=label(entry.get("im:releaseDate")),
    )


def parse_list_feed(body: str) -> List[ListApp]:
    """Parse a top-charts RSS feed."""
    return [clean_list_app(entry) for entry in feed_entries(body)]


def list_feed_ids(body: str) -> List[str]:
    """App ids of a top-charts feed, in chart order."""
    return [attribute(entry["id"], "im:id") for entry in feed_entries(body)]


def clean_review(entry: Dict[str, Any]) -> Review:
    author = entry.get("author") or {}
    links = ensure_list(entry.get("link"))
    return Review(
        id=label(entry["id"]),
        user_name=label(author.get("name")),
        user_url=label(author.get("uri")),
        version=label(entry.get("im:version")),
        score=int(label(entry["im:rating"])),
        title=label(entry.get("title")),
        text=label(entry.get("content")),
        url=attribute(links[0], "href") if links else None,
        updated=label(entry.get("updated")),
    )


def parse_reviews_feed(body: str) -> List[Review]:
    """Parse a customer-reviews feed page.

    Rows without a rating are the app's own metadata row, which some
    storefronts put first; they are not reviews.
    """
    reviews = []
    for entry in feed_entries(body):
        if "im:rating" not in entry:
            logger.debug(f"Skipping feed row without rating: {label(entry.get('id'))}")
            continue
        reviews.append(clean_review(entry))
    return reviews

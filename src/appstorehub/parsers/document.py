"""Server-rendered storefront pages -> ratings, privacy and version history.

Every lookup here is defensive: a missing node produces an empty string, an
empty list or zero. Whether an empty document means "not found" is decided by
the caller before a page reaches these functions.
"""

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ..core.constants import Selectors
from ..core.models import (
    PrivacyDataCategory,
    PrivacyDetails,
    PrivacyPurpose,
    PrivacyType,
    RatingsResult,
    VersionHistoryEntry,
    empty_histogram,
)
from .normalize import to_identifier

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"\d+")


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _text(node: Optional[Tag]) -> str:
    if node is None:
        return ""
    return node.get_text(" ", strip=True)


def _first_int(text: str) -> int:
    match = _DIGITS_RE.search(text)
    return int(match.group(0)) if match else 0


def parse_ratings(html: str) -> RatingsResult:
    """Rating count and per-star histogram from the customer-reviews page.

    Bars are rendered from five stars down to one, so the first bar in DOM
    order is the five-star bucket.
    """
    soup = _soup(html)
    ratings = _first_int("".join(node.get_text() for node in soup.select(Selectors.RATING_COUNT)))

    histogram = empty_histogram()
    bars = soup.select(Selectors.RATING_BARS)
    if bars and len(bars) != 5:
        logger.warning(f"Expected 5 rating bars, found {len(bars)}")
    for index, bar in enumerate(bars[:5]):
        histogram[5 - index] = _first_int(bar.get_text())

    return RatingsResult(ratings=ratings, histogram=histogram)


def _heading(node: Tag) -> str:
    return _text(node.select_one(Selectors.HEADINGS))


def _has_class(node: Tag, class_name: str) -> bool:
    return class_name in (node.get("class") or [])


def _simple_categories(article: Tag) -> List[str]:
    categories = []
    for item in article.find_all("li"):
        if _has_class(item, Selectors.PURPOSE_CATEGORY):
            continue
        if item.find_parent(class_=Selectors.PURPOSE_SECTION) is not None:
            continue
        if item.find_parent("li") is not None:
            continue
        text = _text(item)
        if text:
            categories.append(text)
    return categories


def _purpose(section: Tag) -> PrivacyPurpose:
    name = _heading(section)
    data_categories = []
    for category in section.select(f"li.{Selectors.PURPOSE_CATEGORY}"):
        title = _text(category.select_one(f"{Selectors.HEADINGS}, {Selectors.CATEGORY_TITLE}"))
        data_types = [_text(item) for item in category.find_all("li")]
        data_categories.append(PrivacyDataCategory(
            data_category=title,
            identifier=to_identifier(title),
            data_types=[data_type for data_type in data_types if data_type],
        ))
    return PrivacyPurpose(purpose=name, identifier=to_identifier(name), data_categories=data_categories)


def parse_privacy(html: str) -> PrivacyDetails:
    """Privacy label sections from the app page's privacy view.

    Only detail articles whose heading mentions "Data" are privacy sections;
    the same page layout is reused for unrelated panels.
    """
    soup = _soup(html)
    privacy_types = []
    for article in soup.select(Selectors.PRIVACY_ARTICLE):
        title = _heading(article)
        if Selectors.PRIVACY_MARKER not in title:
            continue
        privacy_types.append(PrivacyType(
            privacy_type=title,
            identifier=to_identifier(title),
            description=_text(article.find("p")),
            data_categories=_simple_categories(article),
            purposes=[_purpose(section) for section in article.select(f".{Selectors.PURPOSE_SECTION}")],
        ))

    link = soup.select_one(Selectors.MANAGE_CHOICES_LINK)
    manage_url = link.get("href") if link is not None else None
    logger.debug(f"Parsed {len(privacy_types)} privacy sections")
    return PrivacyDetails(privacy_types=privacy_types, manage_privacy_choices_url=manage_url)


def parse_version_history(html: str) -> List[VersionHistoryEntry]:
    """Version history rows in page order (most recent first on the live site)."""
    soup = _soup(html)
    entries = []
    for article in soup.select(Selectors.VERSION_ARTICLE):
        version = _text(article.select_one(Selectors.VERSION_LABEL))
        if not version:
            continue
        time_node = article.select_one(Selectors.RELEASE_DATE)
        notes = _text(article.find("p"))
        entries.append(VersionHistoryEntry(
            version_display=version,
            release_date=time_node.get("datetime", "") if time_node is not None else "",
            release_notes=notes or None,
        ))
    return entries

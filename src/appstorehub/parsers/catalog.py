"""Lookup endpoint JSON -> App records."""

import json
import logging
from typing import Any, Dict, List

from ..core.models import App
from .normalize import pick_icon

logger = logging.getLogger(__name__)


def clean_app(entry: Dict[str, Any]) -> App:
    """Map one ``results[]`` entry of the lookup response onto App."""
    return App(
        id=entry["trackId"],
        app_id=entry.get("bundleId"),
        title=entry.get("trackName"),
        url=entry.get("trackViewUrl"),
        description=entry.get("description"),
        icon=pick_icon(entry),
        genres=entry.get("genres") or [],
        genre_ids=entry.get("genreIds") or [],
        primary_genre=entry.get("primaryGenreName"),
        primary_genre_id=entry.get("primaryGenreId"),
        content_rating=entry.get("contentAdvisoryRating"),
        languages=entry.get("languageCodesISO2A") or [],
        size=entry.get("fileSizeBytes"),
        required_os_version=entry.get("minimumOsVersion"),
        released=entry.get("releaseDate"),
        updated=entry.get("currentVersionReleaseDate") or entry.get("releaseDate"),
        release_notes=entry.get("releaseNotes"),
        version=entry.get("version"),
        price=entry.get("price"),
        currency=entry.get("currency"),
        developer_id=entry.get("artistId"),
        developer=entry.get("artistName"),
        developer_url=entry.get("artistViewUrl"),
        developer_website=entry.get("sellerUrl"),
        score=entry.get("averageUserRating"),
        reviews=entry.get("userRatingCount"),
        current_version_score=entry.get("averageUserRatingForCurrentVersion"),
        current_version_reviews=entry.get("userRatingCountForCurrentVersion"),
        screenshots=entry.get("screenshotUrls") or [],
        ipad_screenshots=entry.get("ipadScreenshotUrls") or [],
        appletv_screenshots=entry.get("appletvScreenshotUrls") or [],
        supported_devices=entry.get("supportedDevices") or [],
    )


def is_software(entry: Dict[str, Any]) -> bool:
    wrapper_type = entry.get("wrapperType")
    return wrapper_type is None or wrapper_type == "software"


def parse_lookup(body: str) -> List[App]:
    """Parse a lookup response, keeping only software results.

    The lookup endpoint is multi-type: an artist id returns the artist row
    alongside its apps. An empty list is a valid result.
    """
    response = json.loads(body)
    results = response.get("results", [])
    apps = [clean_app(entry) for entry in results if is_software(entry)]
    logger.debug(f"Lookup returned {len(results)} results, {len(apps)} apps")
    return apps

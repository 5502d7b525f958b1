"""Token-gated catalog API JSON -> PrivacyDetails / VersionHistoryEntry."""

import json
from typing import Any, Dict, List

from ..core.errors import NotFoundError
from ..core.models import (
    PrivacyDataCategory,
    PrivacyDetails,
    PrivacyPurpose,
    PrivacyType,
    VersionHistoryEntry,
)


def first_attributes(body: str) -> Dict[str, Any]:
    """``data[0].attributes`` of a catalog response; empty body or data is not-found."""
    if not body:
        raise NotFoundError()
    data = json.loads(body).get("data") or []
    if not data:
        raise NotFoundError()
    return data[0]["attributes"]


def _data_category(node: Dict[str, Any]) -> PrivacyDataCategory:
    return PrivacyDataCategory(
        data_category=node.get("dataCategory", ""),
        identifier=node.get("identifier", ""),
        data_types=list(node.get("dataTypes") or []),
    )


def _privacy_type(node: Dict[str, Any]) -> PrivacyType:
    return PrivacyType(
        privacy_type=node.get("privacyType", ""),
        identifier=node.get("identifier", ""),
        description=node.get("description", ""),
        data_categories=[category.get("dataCategory", "") for category in node.get("dataCategories") or []],
        purposes=[
            PrivacyPurpose(
                purpose=purpose.get("purpose", ""),
                identifier=purpose.get("identifier", ""),
                data_categories=[_data_category(category) for category in purpose.get("dataCategories") or []],
            )
            for purpose in node.get("purposes") or []
        ],
    )


def parse_privacy_payload(body: str) -> PrivacyDetails:
    details = first_attributes(body)["privacyDetails"]
    return PrivacyDetails(
        privacy_types=[_privacy_type(node) for node in details.get("privacyTypes") or []],
        manage_privacy_choices_url=details.get("managePrivacyChoicesUrl"),
    )


def parse_version_history_payload(body: str) -> List[VersionHistoryEntry]:
    history = first_attributes(body)["platformAttributes"]["ios"]["versionHistory"]
    return [
        VersionHistoryEntry(
            version_display=row.get("versionDisplay", ""),
            release_date=row.get("releaseDate", ""),
            release_notes=row.get("releaseNotes") or None,
        )
        for row in history
    ]

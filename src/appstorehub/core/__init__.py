"""Core modules for appstorehub."""

from .models import *
from .config import settings
from .errors import AppStoreError, HttpError, NotFoundError, AuthTokenNotFoundError

__all__ = [
    "settings",
    "App",
    "AppWithRatings",
    "ListApp",
    "Review",
    "RatingsResult",
    "PrivacyDetails",
    "PrivacyType",
    "PrivacyPurpose",
    "PrivacyDataCategory",
    "VersionHistoryEntry",
    "Suggestion",
    "RequestOptions",
    "AppStoreError",
    "HttpError",
    "NotFoundError",
    "AuthTokenNotFoundError",
]

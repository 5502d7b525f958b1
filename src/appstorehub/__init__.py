"""appstorehub - typed App Store catalog, review and privacy client."""

__version__ = "1.0.0"

from .core.models import *
from .core.config import settings
from .core.constants import Collection, Category, Device, Sort, MARKETS
from .core.errors import AppStoreError, HttpError, NotFoundError, AuthTokenNotFoundError
from .services.appstore import AppStoreService, store_id
from .services.cache import MemoizedAppStore

__all__ = [
    "settings",
    "AppStoreService",
    "MemoizedAppStore",
    "store_id",
    "Collection",
    "Category",
    "Device",
    "Sort",
    "MARKETS",
    "AppStoreError",
    "HttpError",
    "NotFoundError",
    "AuthTokenNotFoundError",
    "App",
    "AppWithRatings",
    "ListApp",
    "Review",
    "RatingsResult",
    "PrivacyDetails",
    "VersionHistoryEntry",
    "Suggestion",
    "RequestOptions",
]

"""Data models for appstorehub."""

from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any, Union


@dataclass(frozen=True)
class RequestOptions:
    """Per-call HTTP options; headers here override every other header."""
    method: str = "GET"
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None


@dataclass(frozen=True)
class App:
    """Full catalog record from the lookup endpoint."""
    id: Union[int, str]
    app_id: str
    title: str
    url: Optional[str] = None
    description: Optional[str] = None
    icon: str = ""
    genres: List[str] = field(default_factory=list)
    genre_ids: List[str] = field(default_factory=list)
    primary_genre: Optional[str] = None
    primary_genre_id: Optional[int] = None
    content_rating: Optional[str] = None
    languages: List[str] = field(default_factory=list)
    size: Optional[str] = None
    required_os_version: Optional[str] = None
    released: Optional[str] = None
    updated: Optional[str] = None
    release_notes: Optional[str] = None
    version: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    developer_id: Optional[int] = None
    developer: Optional[str] = None
    developer_url: Optional[str] = None
    developer_website: Optional[str] = None
    score: Optional[float] = None
    reviews: Optional[int] = None
    current_version_score: Optional[float] = None
    current_version_reviews: Optional[int] = None
    screenshots: List[str] = field(default_factory=list)
    ipad_screenshots: List[str] = field(default_factory=list)
    appletv_screenshots: List[str] = field(default_factory=list)
    supported_devices: List[str] = field(default_factory=list)
    free: bool = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "free", self.price == 0)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ListApp:
    """Lighter catalog entry built from an RSS list feed."""
    id: str
    app_id: str
    title: str
    icon: str
    price: float
    currency: str
    developer: str
    genre: str
    genre_id: str
    released: str
    url: Optional[str] = None
    description: Optional[str] = None
    developer_url: Optional[str] = None
    developer_id: Optional[str] = None
    free: bool = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "free", self.price == 0)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Review:
    """One user review from the customer reviews feed."""
    id: str
    user_name: str
    user_url: str
    version: str
    score: int           # 1 to 5 stars
    title: str
    text: str
    url: str
    updated: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def empty_histogram() -> Dict[int, int]:
    return {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}


@dataclass(frozen=True)
class RatingsResult:
    """Aggregate rating count plus the five-bucket star histogram."""
    ratings: int = 0
    histogram: Dict[int, int] = field(default_factory=empty_histogram)

    def to_dict(self) -> Dict[str, Any]:
        return {"ratings": self.ratings, "histogram": dict(self.histogram)}


@dataclass(frozen=True)
class AppWithRatings:
    """An App paired with its ratings breakdown."""
    app: App
    ratings: RatingsResult

    def to_dict(self) -> Dict[str, Any]:
        data = self.app.to_dict()
        data.update(self.ratings.to_dict())
        return data


@dataclass(frozen=True)
class PrivacyDataCategory:
    data_category: str
    identifier: str
    data_types: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class PrivacyPurpose:
    purpose: str
    identifier: str
    data_categories: List[PrivacyDataCategory] = field(default_factory=list)


@dataclass(frozen=True)
class PrivacyType:
    privacy_type: str
    identifier: str
    description: str = ""
    data_categories: List[str] = field(default_factory=list)
    purposes: List[PrivacyPurpose] = field(default_factory=list)


@dataclass(frozen=True)
class PrivacyDetails:
    """Privacy label sections published for an app."""
    privacy_types: List[PrivacyType] = field(default_factory=list)
    manage_privacy_choices_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class VersionHistoryEntry:
    version_display: str
    release_date: str
    release_notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Suggestion:
    term: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

"""Exception hierarchy for appstorehub."""


class AppStoreError(Exception):
    """Base class for every failure raised by appstorehub."""


class HttpError(AppStoreError):
    """The storefront answered with a non-2xx status."""

    def __init__(self, status_code: int):
        super().__init__(f"Request failed with status {status_code}")
        self.status_code = status_code


class NotFoundError(AppStoreError):
    """The request succeeded but there was nothing to return."""

    def __init__(self, message: str = "App not found (404)"):
        super().__init__(message)


class AuthTokenNotFoundError(AppStoreError):
    """The storefront page did not carry the bearer token the catalog API needs.

    Kept apart from NotFoundError: this is what a markup change or a blocked
    client looks like, and callers may fall back to the document scraper.
    """

    def __init__(self, message: str = "Could not find authentication token"):
        super().__init__(message)

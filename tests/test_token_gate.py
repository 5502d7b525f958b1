"""Tests for the token-gated catalog API flow."""

import asyncio
import json

import pytest

from appstorehub.core.errors import AuthTokenNotFoundError, NotFoundError
from appstorehub.parsers.catalog_api import parse_privacy_payload, parse_version_history_payload
from appstorehub.services.token_gate import TokenGate

TOKEN_PAGE = '<meta name="web-experience-app/config/environment" content="%7B%22token%22%3A%22abc.def%22%7D">'

PRIVACY_BODY = json.dumps({"data": [{"attributes": {"privacyDetails": {
    "managePrivacyChoicesUrl": "https://king.com/privacy-choices",
    "privacyTypes": [
        {
            "privacyType": "Data Used to Track You",
            "identifier": "DATA_USED_TO_TRACK_YOU",
            "description": "The following data may be used to track you.",
            "dataCategories": [
                {"dataCategory": "Identifiers", "identifier": "IDENTIFIERS", "dataTypes": ["User ID"]},
            ],
            "purposes": [],
        },
        {
            "privacyType": "Data Linked to You",
            "identifier": "DATA_LINKED_TO_YOU",
            "description": "Linked data.",
            "dataCategories": [],
            "purposes": [{
                "purpose": "Analytics",
                "identifier": "ANALYTICS",
                "dataCategories": [
                    {"dataCategory": "Usage Data", "identifier": "USAGE_DATA",
                     "dataTypes": ["Product Interaction"]},
                ],
            }],
        },
    ],
}}}]})

VERSION_BODY = json.dumps({"data": [{"attributes": {"platformAttributes": {"ios": {"versionHistory": [
    {"versionDisplay": "1.275.0", "releaseDate": "2024-05-01", "releaseNotes": "Bug fixes."},
    {"versionDisplay": "1.274.1", "releaseDate": "2024-04-20"},
]}}}}]})


class TestTokenGate:
    """Test the token scrape followed by the authenticated request."""

    def test_missing_token_stops_before_api_call(self, fake_transport):
        fake_transport.add("apps.apple.com/us/app/id553834731", "<html>no token here</html>")
        gate = TokenGate(fake_transport)

        with pytest.raises(AuthTokenNotFoundError):
            asyncio.run(gate.fetch(553834731, "us", "platform=web", parse_privacy_payload))

        assert len(fake_transport.calls) == 1

    def test_token_is_sent_as_bearer(self, fake_transport):
        fake_transport.add("amp-api-edge.apps.apple.com", PRIVACY_BODY)
        fake_transport.add("apps.apple.com/us/app/id553834731", TOKEN_PAGE)
        gate = TokenGate(fake_transport)

        asyncio.run(gate.fetch(553834731, "us", "platform=web&fields=privacyDetails", parse_privacy_payload))

        page_call, api_call = fake_transport.calls
        assert page_call["url"] == "https://apps.apple.com/us/app/id553834731"
        assert api_call["url"] == (
            "https://amp-api-edge.apps.apple.com/v1/catalog/us/apps/553834731"
            "?platform=web&fields=privacyDetails"
        )
        assert api_call["headers"] == {
            "Origin": "https://apps.apple.com",
            "Authorization": "Bearer abc.def",
        }

    def test_throttle_applies_to_both_requests(self, fake_transport):
        fake_transport.add("amp-api-edge.apps.apple.com", VERSION_BODY)
        fake_transport.add("apps.apple.com/gb/app/id1", TOKEN_PAGE)

        asyncio.run(TokenGate(fake_transport).fetch(1, "gb", "extend=versionHistory",
                                                    parse_version_history_payload, limit=3))

        assert [call["limit"] for call in fake_transport.calls] == [3, 3]

    def test_empty_api_body_is_not_found(self, fake_transport):
        fake_transport.add("amp-api-edge.apps.apple.com", "")
        fake_transport.add("apps.apple.com/us/app/id1", TOKEN_PAGE)

        with pytest.raises(NotFoundError):
            asyncio.run(TokenGate(fake_transport).fetch(1, "us", "q=1", parse_privacy_payload))

    def test_auth_error_is_distinct_from_not_found(self):
        assert not issubclass(AuthTokenNotFoundError, NotFoundError)


class TestCatalogPayloads:
    """Test projections of the catalog API responses."""

    def test_privacy_payload(self):
        details = parse_privacy_payload(PRIVACY_BODY)

        assert details.manage_privacy_choices_url == "https://king.com/privacy-choices"
        tracking, linked = details.privacy_types
        assert tracking.identifier == "DATA_USED_TO_TRACK_YOU"
        assert tracking.data_categories == ["Identifiers"]
        assert linked.purposes[0].purpose == "Analytics"
        assert linked.purposes[0].data_categories[0].data_types == ["Product Interaction"]

    def test_version_history_payload(self):
        entries = parse_version_history_payload(VERSION_BODY)

        assert [entry.version_display for entry in entries] == ["1.275.0", "1.274.1"]
        assert entries[0].release_notes == "Bug fixes."
        assert entries[1].release_notes is None

    def test_empty_data_is_not_found(self):
        with pytest.raises(NotFoundError):
            parse_version_history_payload('{"data": []}')


if __name__ == "__main__":
    pytest.main([__file__])

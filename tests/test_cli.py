"""Tests for the command-line interface."""

import json

import pytest
import requests
from unittest.mock import AsyncMock, MagicMock, patch

from appstorehub.cli import build_call, build_parser, main
from appstorehub.core.errors import NotFoundError
from appstorehub.core.models import App, RatingsResult, Suggestion


def _call(*argv):
    return build_call(build_parser().parse_args(list(argv)))


class TestBuildCall:
    """Test mapping of subcommands onto service operations."""

    def test_app_by_numeric_id(self):
        operation, params = _call("app", "553834731", "--country", "gb")
        assert operation == "app"
        assert params["id"] == "553834731"
        assert params["country"] == "gb"

    def test_app_by_bundle_id_with_ratings(self):
        operation, params = _call("app", "com.midasplayer.apps.candycrushsaga", "--ratings")
        assert operation == "app_with_ratings"
        assert params["app_id"] == "com.midasplayer.apps.candycrushsaga"
        assert "id" not in params

    def test_list_variants(self):
        assert _call("list")[0] == "list_apps"
        operation, params = _call("list", "--full-detail", "--category", "6014", "--num", "10")
        assert operation == "list_apps_detailed"
        assert params["category"] == 6014
        assert params["num"] == 10

    def test_search_variants(self):
        assert _call("search", "puzzle")[0] == "search"
        operation, params = _call("search", "puzzle", "--ids-only", "--page", "2")
        assert operation == "search_ids"
        assert params["page"] == 2

    def test_api_flag_selects_catalog_api(self):
        assert _call("privacy", "1")[0] == "privacy"
        assert _call("privacy", "1", "--api")[0] == "privacy_from_api"
        assert _call("version-history", "1", "--api")[0] == "version_history_from_api"

    def test_throttle_is_parsed_as_float(self):
        _, params = _call("ratings", "1", "--throttle", "2")
        assert params["throttle"] == 2.0

    def test_invalid_sort_is_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            _call("reviews", "1", "--sort", "newest")


@patch("appstorehub.cli.AppStoreService")
class TestMain:
    """Test end-to-end command execution with a stubbed service."""

    def _service(self, mock_service_class, **operations):
        service = MagicMock()
        for name, result in operations.items():
            setattr(service, name, AsyncMock(**result))
        mock_service_class.return_value = service
        return service

    def test_prints_result_as_json(self, mock_service_class, capsys):
        service = self._service(mock_service_class, suggest={"return_value": [Suggestion(term="clash royale")]})

        main(["suggest", "clash"])

        service.suggest.assert_awaited_once_with(term="clash", country=None, throttle=None)
        assert json.loads(capsys.readouterr().out) == [{"term": "clash royale"}]

    def test_exports_to_file(self, mock_service_class, tmp_path, capsys):
        self._service(mock_service_class, ratings={"return_value": RatingsResult(ratings=2)})
        out = tmp_path / "ratings.json"

        main(["ratings", "553834731", "--out", str(out)])

        payload = json.loads(out.read_text(encoding="utf-8"))
        assert payload["operation"] == "ratings"
        assert payload["params"] == {"id": "553834731"}
        assert payload["result"]["ratings"] == 2
        assert payload["metadata"]["export_timestamp"] is not None
        assert "Results exported to" in capsys.readouterr().out

    def test_app_result_includes_derived_fields(self, mock_service_class, capsys):
        app = App(id=1, app_id="com.example", title="Example", price=0.0)
        self._service(mock_service_class, app={"return_value": app})

        main(["app", "1"])

        data = json.loads(capsys.readouterr().out)
        assert data["free"] is True
        assert data["title"] == "Example"

    @pytest.mark.parametrize("error", [
        NotFoundError(),
        requests.ConnectionError("connection refused"),
        json.JSONDecodeError("Expecting value", "<html>", 0),
    ])
    def test_errors_exit_with_status_one(self, mock_service_class, error):
        self._service(mock_service_class, app={"side_effect": error})

        with pytest.raises(SystemExit) as excinfo:
            main(["app", "1"])

        assert excinfo.value.code == 1

    def test_no_command_prints_help(self, mock_service_class, capsys):
        main([])
        assert "usage" in capsys.readouterr().out
        mock_service_class.assert_not_called()


if __name__ == "__main__":
    pytest.main([__file__])

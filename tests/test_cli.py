"""
Test the graphcall CLI argument parsing and output

These tests validate that the CLI entry point builds the right API call,
prints results as JSON and exits with status 1 on API errors.
"""

import json
import logging
import sys
from unittest.mock import patch

import pytest

from graphcall import cli
from graphcall.exceptions import APIError
from graphcall.http_service import Response


@pytest.fixture(autouse=True)
def no_env_credentials(monkeypatch):
    """Keep real credentials out of the tests"""
    monkeypatch.delenv("GRAPH_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("GRAPH_APP_SECRET", raising=False)


def run_cli(args):
    with patch.object(sys, "argv", ["graphcall", *args]):
        cli.main()


class TestParseParam:
    """Test KEY=VALUE parsing"""

    def test_simple_value(self):
        assert cli.parse_param("limit=10") == ("limit", "10")

    def test_comma_value_becomes_list(self):
        assert cli.parse_param("fields=id,name") == ("fields", ["id", "name"])

    def test_value_with_equals(self):
        assert cli.parse_param("q=a=b") == ("q", "a=b")

    def test_missing_equals(self):
        with pytest.raises(Exception):
            cli.parse_param("limit")


class TestMain:
    """Test the CLI run"""

    @patch("graphcall.cli.API")
    def test_basic_call(self, mock_api_class, capsys):
        """Should call the API with defaults and print JSON"""
        mock_api_class.return_value.api.return_value = {"id": "1"}

        run_cli(["me", "--quiet"])

        mock_api_class.assert_called_once_with(None, None)
        path, params, verb, options = mock_api_class.return_value.api.call_args[0]
        assert (path, params, verb) == ("me", {}, "get")
        assert "http_component" not in options
        assert json.loads(capsys.readouterr().out) == {"id": "1"}

    @patch("graphcall.cli.API")
    def test_params_and_options(self, mock_api_class, capsys):
        """Should pass params, verb, component and appsecret_proof through"""
        mock_api_class.return_value.api.return_value = 200

        run_cli(
            [
                "/me/feed",
                "--param",
                "fields=id,name",
                "--param",
                "limit=5",
                "--verb",
                "post",
                "--component",
                "status",
                "--appsecret-proof",
                "--access-token",
                "tok",
                "--app-secret",
                "sec",
                "--timeout",
                "5",
                "--quiet",
            ]
        )

        mock_api_class.assert_called_once_with("tok", "sec")
        path, params, verb, options = mock_api_class.return_value.api.call_args[0]
        assert path == "/me/feed"
        assert params == {"fields": ["id", "name"], "limit": "5"}
        assert verb == "post"
        assert options == {"timeout": 5.0, "http_component": "status", "appsecret_proof": True}
        assert json.loads(capsys.readouterr().out) == 200

    @patch("graphcall.cli.API")
    def test_credentials_from_environment(self, mock_api_class, monkeypatch):
        """Should fall back to GRAPH_ACCESS_TOKEN and GRAPH_APP_SECRET"""
        monkeypatch.setenv("GRAPH_ACCESS_TOKEN", "env-token")
        monkeypatch.setenv("GRAPH_APP_SECRET", "env-secret")
        mock_api_class.return_value.api.return_value = None

        run_cli(["me", "--quiet"])

        mock_api_class.assert_called_once_with("env-token", "env-secret")

    @patch("graphcall.cli.API")
    def test_response_component_printed(self, mock_api_class, capsys):
        """Should print status, headers and body for a raw Response"""
        mock_api_class.return_value.api.return_value = Response(200, "true", {"etag": "x"})

        run_cli(["me", "--component", "response", "--quiet"])

        assert json.loads(capsys.readouterr().out) == {
            "status": 200,
            "headers": {"etag": "x"},
            "body": "true",
        }

    @patch("graphcall.cli.API")
    def test_api_error_exits(self, mock_api_class):
        """Should exit with status 1 on APIError"""
        mock_api_class.return_value.api.side_effect = APIError(
            "server error", status_code=500, response_body="oops"
        )

        with pytest.raises(SystemExit) as exc_info:
            run_cli(["me", "--quiet"])

        assert exc_info.value.code == 1

    @patch("graphcall.cli.API")
    def test_invalid_json_exits(self, mock_api_class):
        """Should exit with status 1 when the body is not JSON"""
        mock_api_class.return_value.api.side_effect = json.JSONDecodeError("bad", "{", 0)

        with pytest.raises(SystemExit) as exc_info:
            run_cli(["me", "--quiet"])

        assert exc_info.value.code == 1

    def test_path_required(self):
        """Should fail without a path"""
        with pytest.raises(SystemExit) as exc_info:
            run_cli([])

        assert exc_info.value.code != 0

    @patch("graphcall.cli.API")
    def test_default_timeout_from_config(self, mock_api_class):
        """Should take the timeout from config when --timeout is omitted"""
        mock_api_class.return_value.api.return_value = None

        run_cli(["me", "--quiet"])

        options = mock_api_class.return_value.api.call_args[0][3]
        assert options == {"timeout": cli.config.get("api.timeouts.request", 30)}

    @patch("graphcall.cli.API")
    def test_log_file(self, mock_api_class, tmp_path):
        """Should write DEBUG output to --log-file"""
        mock_api_class.return_value.api.side_effect = APIError(
            "server error", status_code=503, response_body="down"
        )
        log_file = tmp_path / "graphcall.log"

        with pytest.raises(SystemExit):
            run_cli(["me", "--quiet", "--log-file", str(log_file)])

        logger = logging.getLogger("graphcall")
        for handler in logger.handlers:
            handler.close()
        logger.handlers = []
        assert "GRAPH API ERROR" in log_file.read_text(encoding="utf-8")

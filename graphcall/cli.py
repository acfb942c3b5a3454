"""
Command-line Graph API caller

Issues a single Graph API call and prints the decoded result as JSON.
Installed as the `graphcall` console script (or run with `python -m graphcall.cli`).
"""

import argparse
import json
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .api import API
from .config import config
from .exceptions import APIError, ConfigurationError
from .http_service import Response
from .logging_config import get_module_logger, setup_logging

logger = get_module_logger("cli")


def _print_error_box(title: str, details: str, suggestions: str | None = None) -> None:
    """
    Print a formatted error box with title, details, and optional suggestions.

    Args:
        title: Error title/header
        details: Error details/description
        suggestions: Optional suggestions for resolving the error
    """
    logger.error("=" * 80)
    logger.error(title)
    logger.error("=" * 80)
    logger.error("")
    logger.error(details)
    logger.error("")
    if suggestions:
        logger.error(suggestions)
        logger.error("")
    logger.error("=" * 80)


def parse_param(raw: str) -> tuple[str, Any]:
    """
    Parse a --param argument of the form KEY=VALUE.

    Values containing commas become lists so that they go through the same
    comma-joining as list parameters passed from Python code.
    """
    if "=" not in raw:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{raw}'")
    key, value = raw.split("=", 1)
    if "," in value:
        return key, value.split(",")
    return key, value


def _to_printable(result: Any) -> Any:
    if isinstance(result, Response):
        return {"status": result.status, "headers": dict(result.headers), "body": result.body}
    if isinstance(result, Mapping):
        return dict(result)
    return result


def main():
    parser = argparse.ArgumentParser(
        prog="graphcall",
        description="Call the Graph API and print the result as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Configuration:
  The server URL, User-Agent and default timeout come from the bundled
  api_config.yaml, or from GRAPHCALL_CONFIG_DIR/api_config.yaml when set.
  Credentials default to the GRAPH_ACCESS_TOKEN and GRAPH_APP_SECRET
  environment variables.

Examples:
  graphcall me
  graphcall /me/friends --param fields=id,name --param limit=10
  graphcall 12345 --verb delete
  graphcall me --appsecret-proof --app-secret s3cr3t
  graphcall me --component response
        """,
    )

    default_timeout = config.get("api.timeouts.request", 30)

    parser.add_argument("path", type=str, help='Graph path or object id (e.g. "me", 12345)')
    parser.add_argument(
        "--param",
        type=parse_param,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Request parameter (repeatable); comma-separated values are sent as a list",
    )
    parser.add_argument("--verb", type=str, default="get", help="HTTP verb (default: get)")
    parser.add_argument(
        "--component",
        type=str,
        default=None,
        help='Return part of the raw response instead of the body ("response", "status", "headers", "body")',
    )
    parser.add_argument(
        "--appsecret-proof",
        action="store_true",
        help="Send appsecret_proof (needs both an access token and an app secret)",
    )
    parser.add_argument("--access-token", type=str, default=None, help="Access token")
    parser.add_argument("--app-secret", type=str, default=None, help="Application secret")
    parser.add_argument(
        "--timeout",
        type=float,
        default=default_timeout,
        help=f"Request timeout in seconds (default: {default_timeout})",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Write DEBUG log to this file")
    parser.add_argument("--quiet", action="store_true", help="Suppress console log output")

    args = parser.parse_args()

    setup_logging(Path(args.log_file) if args.log_file else None, verbose=not args.quiet)

    access_token = args.access_token or os.getenv("GRAPH_ACCESS_TOKEN")
    app_secret = args.app_secret or os.getenv("GRAPH_APP_SECRET")

    if args.appsecret_proof and not (access_token and app_secret):
        logger.warning("--appsecret-proof needs both an access token and an app secret; not sent")

    options: dict[str, Any] = {"timeout": args.timeout}
    if args.component:
        options["http_component"] = args.component
    if args.appsecret_proof:
        options["appsecret_proof"] = True

    client = API(access_token, app_secret)

    try:
        result = client.api(args.path, dict(args.param), args.verb, options)
    except APIError as e:
        details = f"Status Code: {e.status_code}\nBody: {e.response_body}"
        _print_error_box("GRAPH API ERROR", details, e.get_user_guidance())
        sys.exit(1)
    except json.JSONDecodeError as e:
        _print_error_box("INVALID JSON RESPONSE", f"Could not decode response body: {e}")
        sys.exit(1)
    except ConfigurationError as e:
        _print_error_box("CONFIGURATION ERROR", str(e), "Check api_config.yaml (or GRAPHCALL_CONFIG_DIR).")
        sys.exit(1)

    print(json.dumps(_to_printable(result), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()

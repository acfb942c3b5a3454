"""
Default transport for the Graph API client

Turns a canonical request (path, params, verb, http_options) into an HTTP
call through HttpClient and wraps the result in a Response.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .config import Config, config
from .http_client import HttpClient, default_http_client
from .logging_config import get_module_logger

logger = get_module_logger("http_service")

# Verbs the HTTP layer sends natively; everything else is tunneled through POST
NATIVE_VERBS = ("get", "post")


@dataclass(frozen=True)
class Response:
    """Raw HTTP response as seen by the API client (status, body, headers)"""

    status: int
    body: str
    # Compared but not hashed
    headers: Mapping[str, Any] = field(default_factory=dict, hash=False)


def make_request(
    path: str,
    params: dict[str, Any],
    verb: str,
    http_options: dict[str, Any],
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> Response:
    """
    Perform one Graph API request

    Args:
        path: Normalized API path (always starts with "/")
        params: Request parameters, already carrying auth fields
        verb: HTTP verb ("get", "post", "delete", ...)
        http_options: Transport options; "timeout" and "headers" are honoured
        http_client: HTTP client for making requests (optional)
        config_obj: Config object (optional, uses global config if None)

    Returns:
        Response built from the HTTP status, text and headers

    Raises:
        requests.exceptions.RequestException: On network failures (not retried)
    """
    if http_client is None:
        http_client = default_http_client
    if config_obj is None:
        config_obj = config

    url = config_obj.get_required("api.graph.base_url").rstrip("/") + path

    headers = {"User-Agent": config_obj.get("api.headers.user_agent", "GraphCall-Py")}
    headers.update(http_options.get("headers", {}))
    timeout = http_options.get("timeout", config_obj.get("api.timeouts.request", 30))

    verb = verb.lower()
    params = dict(params)
    if verb not in NATIVE_VERBS:
        params["method"] = verb
        verb = "post"

    logger.debug(f"{verb.upper()} {url}")

    if verb == "get":
        raw = http_client.get(url, headers=headers, params=params, timeout=timeout)
    else:
        raw = http_client.post(url, headers=headers, data=params, timeout=timeout)

    return Response(raw.status_code, raw.text, dict(raw.headers))

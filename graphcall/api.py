"""
Graph API client

Builds the canonical request for a Graph API call (path and parameter
normalization, access token and appsecret_proof injection), hands it to a
transport and interprets the Response that comes back.
"""

import hashlib
import hmac
import json
from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from functools import partial
from operator import attrgetter
from typing import Any

from .config import Config, config
from .exceptions import APIError
from .http_service import Response, make_request
from .logging_config import get_module_logger

logger = get_module_logger("api")

Transport = Callable[[str, dict[str, Any], str, dict[str, Any]], Response]
ErrorCallback = Callable[[Response], None]

# http_component value that returns the whole Response
RESPONSE_COMPONENT = "response"

# Response fields reachable through http_component
RESPONSE_FIELDS: dict[str, Callable[[Response], Any]] = {
    "status": attrgetter("status"),
    "body": attrgetter("body"),
    "headers": attrgetter("headers"),
}

# Options consumed by the client itself; the rest go to the transport
CALL_OPTION_KEYS = ("http_component", "appsecret_proof")


def _is_container(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, (Mapping, Iterable))


def _param_to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def normalize_path(path: Any) -> str:
    """Return the path as a string, prefixed with "/" when it lacks one."""
    path = str(path)
    if not path.startswith("/"):
        path = "/" + path
    return path


def normalize_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Join flat list/tuple values into comma-separated strings

    [1, 2, "3", Sym.FOUR] becomes "1,2,3,four"; booleans are sent lowercase
    and None as an empty item. A sequence holding any
    container (list, dict, set, ...) is passed through as the same object;
    whether the HTTP layer accepts it is up to the transport.

    Returns:
        A new dict; the caller's mapping is not modified
    """
    normalized: dict[str, Any] = {}
    for key, value in (params or {}).items():
        if isinstance(value, (list, tuple)) and not any(_is_container(v) for v in value):
            value = ",".join(_param_to_str(v) for v in value)
        normalized[key] = value
    return normalized


def generate_appsecret_proof(access_token: str, app_secret: str) -> str:
    """Hex-encoded HMAC-SHA256 of the access token, keyed by the app secret."""
    return hmac.new(
        app_secret.encode("utf-8"), access_token.encode("utf-8"), hashlib.sha256
    ).hexdigest()


def inject_auth_params(
    params: dict[str, Any],
    access_token: str | None,
    app_secret: str | None,
    appsecret_proof: bool = False,
) -> dict[str, Any]:
    """
    Add access_token (and optionally appsecret_proof) to the parameters

    The proof is only added when it is requested AND both a token and a
    secret are available. Injected values replace caller-supplied ones.

    Returns:
        A new dict with the auth fields applied
    """
    params = dict(params)
    if access_token:
        params["access_token"] = access_token
        if appsecret_proof and app_secret:
            params["appsecret_proof"] = generate_appsecret_proof(access_token, app_secret)
    return params


def interpret_response(
    response: Response,
    http_component: str | None = None,
    error_callback: ErrorCallback | None = None,
) -> Any:
    """
    Turn a transport Response into the value returned to the caller

    Args:
        response: Response returned by the transport
        http_component: "response" for the Response itself, a field name from
            RESPONSE_FIELDS for that field, or None for the decoded JSON body
        error_callback: Called once with the untouched Response before anything
            else happens, whatever the status code

    Returns:
        The selected component, or the decoded body. Bare JSON scalars such as
        "true"/"false" decode to Python values and an empty body gives None.

    Raises:
        APIError: If the status code is 500 or above
        json.JSONDecodeError: If the body is not valid JSON
    """
    if error_callback is not None:
        error_callback(response)

    if response.status >= 500:
        logger.error(f"Graph API server error: HTTP {response.status}")
        raise APIError(
            f"Graph API server error: HTTP {response.status}",
            status_code=response.status,
            response_body=response.body,
        )

    if http_component == RESPONSE_COMPONENT:
        return response
    if http_component in RESPONSE_FIELDS:
        return RESPONSE_FIELDS[http_component](response)

    # Wrapping the body in a list lets bare scalars and empty bodies decode too
    decoded = json.loads(f"[{response.body}]")
    if len(decoded) > 1:
        raise json.JSONDecodeError("Extra data after JSON value", response.body, 0)
    return decoded[0] if decoded else None


class API:
    """
    Client for the Graph API

    Credentials are fixed at construction time and only read afterwards, so
    one instance can be shared between threads.
    """

    def __init__(
        self,
        access_token: str | None = None,
        app_secret: str | None = None,
        transport: Transport | None = None,
        config_obj: Config | None = None,
    ):
        """
        Initialize the client

        Args:
            access_token: OAuth access token sent with every call (optional)
            app_secret: Application secret used for appsecret_proof (optional)
            transport: Callable performing the HTTP request
                (defaults to http_service.make_request bound to config_obj)
            config_obj: Config object (uses global config if None)
        """
        self._access_token = access_token
        self._app_secret = app_secret
        self.config = config_obj or config
        self.transport = transport or partial(make_request, config_obj=self.config)

    @property
    def access_token(self) -> str | None:
        return self._access_token

    @property
    def app_secret(self) -> str | None:
        return self._app_secret

    def api(
        self,
        path: Any,
        params: Mapping[str, Any] | None = None,
        verb: str = "get",
        options: Mapping[str, Any] | None = None,
        error_callback: ErrorCallback | None = None,
    ) -> Any:
        """
        Make a Graph API call

        Args:
            path: Object path or id (e.g. "me", "/me/friends", 12345)
            params: Request parameters; flat lists are sent comma-separated
            verb: HTTP verb
            options: Call options. "http_component" selects what to return
                (see interpret_response), "appsecret_proof" (default False)
                adds the proof parameter. Other keys go to the transport.
            error_callback: Optional callable receiving the raw Response

        Returns:
            Decoded response body, or the component chosen via http_component

        Raises:
            APIError: If the server answers with a 5xx status
        """
        options = dict(options or {})
        http_component = options.get("http_component")
        appsecret_proof = bool(options.get("appsecret_proof", False))
        http_options = {k: v for k, v in options.items() if k not in CALL_OPTION_KEYS}

        path = normalize_path(path)
        request_params = inject_auth_params(
            normalize_params(params),
            self._access_token,
            self._app_secret,
            appsecret_proof=appsecret_proof,
        )

        logger.debug(f"{verb.upper()} {path} params={sorted(request_params)}")
        response = self.transport(path, request_params, verb, http_options)

        return interpret_response(
            response, http_component=http_component, error_callback=error_callback
        )

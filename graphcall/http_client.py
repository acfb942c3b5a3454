"""HTTP client abstraction for dependency injection and testability."""

from typing import Any

import requests


class HttpClient:
    """
    Thin wrapper around requests used by the default transport.

    Tests replace it with a Mock instead of patching requests globally.
    """

    def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        params: Any | None = None,
        timeout: float | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Send a GET request.

        Args:
            url: URL to request
            headers: Optional HTTP headers
            params: Optional query parameters
            timeout: Optional request timeout in seconds
            **kwargs: Additional arguments to pass to requests.get()

        Returns:
            requests.Response object
        """
        return requests.get(url, headers=headers, params=params, timeout=timeout, **kwargs)

    def post(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        data: Any | None = None,
        timeout: float | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Send a POST request with a form-encoded body.

        Args:
            url: URL to request
            headers: Optional HTTP headers
            data: Form fields to send
            timeout: Optional request timeout in seconds
            **kwargs: Additional arguments to pass to requests.post()

        Returns:
            requests.Response object
        """
        return requests.post(url, headers=headers, data=data, timeout=timeout, **kwargs)


default_http_client = HttpClient()

"""
Custom exceptions for GraphCall-Py
"""


class GraphCallError(Exception):
    """Base exception for all GraphCall errors"""

    pass


class APIError(GraphCallError):
    """
    Raised when the Graph API answers with a server error (HTTP 5xx).

    Carries the status code and raw body so callers can inspect what the
    server actually returned. These errors are never retried internally.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)

    def get_user_guidance(self) -> str:
        """Get user-friendly guidance based on status code"""
        if self.status_code == 503:
            return "The Graph API is temporarily unavailable.\nPlease try again in a few moments."
        elif self.status_code and self.status_code >= 500:
            return (
                "The Graph API reported a server error. This is usually temporary.\n"
                "Please try again in a few moments."
            )
        else:
            return "Please check the request path and parameters and try again."


class ConfigurationError(GraphCallError):
    """
    Raised when required configuration values are missing or invalid.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")

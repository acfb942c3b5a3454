"""GraphCall-Py - thin client for Graph-style social network HTTP APIs."""

from .api import API
from .exceptions import APIError, ConfigurationError, GraphCallError
from .http_service import Response

__all__ = ["API", "APIError", "ConfigurationError", "GraphCallError", "Response"]

"""
Pytest configuration and shared fixtures
"""

from unittest.mock import Mock

import pytest

from graphcall.config import Config
from graphcall.http_service import Response


@pytest.fixture
def test_config():
    """Minimal Graph API configuration"""
    return Config(
        {
            "api": {
                "graph": {"base_url": "https://graph.example.com"},
                "headers": {"user_agent": "GraphCall-Test/1.0"},
                "timeouts": {"request": 15},
            }
        }
    )


@pytest.fixture
def ok_response():
    """Empty 200 response"""
    return Response(200, "", {})


@pytest.fixture
def transport(ok_response):
    """Fake transport returning an empty 200 response"""
    return Mock(return_value=ok_response)

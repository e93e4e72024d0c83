"""
Shared fixtures for the proxy tests
"""
from unittest.mock import patch

import pytest
import requests
from fastapi.testclient import TestClient

from stock_proxy.config import ProxyConfig
from stock_proxy.main import create_app

FRONTEND_ORIGIN = "https://my-stock-order-book.web.app"


def make_upstream_response(status_code: int, body: bytes) -> requests.Response:
    """Build a real requests.Response as the Entrade API would return it"""
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.encoding = "utf-8"
    return response


@pytest.fixture
def config():
    return ProxyConfig()


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def mock_get():
    """Replace the outbound GET made by the Entrade client"""
    with patch("stock_proxy.upstream.entrade.requests.get") as mocked:
        yield mocked

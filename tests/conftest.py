"""Pytest configuration and fixtures."""

import httpx
import pytest

from bitbucket_client.config import Config, set_config
from bitbucket_client.services.bitbucket_client import BitbucketClientV1, BitbucketClientV2

API_V2 = "https://bitbucket.org/api/2.0/"
API_V1 = "https://bitbucket.org/api/1.0/"


@pytest.fixture(autouse=True)
def reset_globals():
    """Use a clean configuration for every test, never the real environment."""
    set_config(Config())
    yield
    set_config(None)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    config = Config(token="test_token")
    set_config(config)
    return config


@pytest.fixture
def client_v2(test_config):
    """2.0 client authenticated with the test token."""
    return BitbucketClientV2(token=test_config.token, config=test_config)


@pytest.fixture
def anonymous_v2():
    """2.0 client without a token."""
    return BitbucketClientV2(config=Config())


@pytest.fixture
def client_v1(test_config):
    """1.0 client authenticated with the test token."""
    return BitbucketClientV1(token=test_config.token, config=test_config)


def page_response(values, next_url=None, **extra) -> httpx.Response:
    """Build a 2.0 paginated JSON response."""
    body = {"values": values, "pagelen": len(values), **extra}
    if next_url:
        body["next"] = next_url
    return httpx.Response(200, json=body)

"""Fixtures for the test suite."""

import pytest

from getresponse_node.authentication.api_key import ApiKeyAuthentication
from getresponse_node.client import GetResponseClient

API_URL = "https://api.getresponse.com/v3"


@pytest.fixture(name="getresponse_client")
def fixture_getresponse_client():
    """Generate a GetResponse client authenticated with an API key."""
    return GetResponseClient(ApiKeyAuthentication("test-api-key"))

"""Test the GetResponse lazy default client."""

from unittest import mock

from getresponse_node import DefaultClient
from getresponse_node.client import GetResponseClient
from getresponse_node.handler import ClientHandler


def test_default_client_lazy_handler(settings):
    """The lazy client resolves to a client configured from the settings."""
    settings.GETRESPONSE_NODE = {
        "AUTHENTICATION": {
            "BACKEND": "getresponse_node.authentication.api_key.ApiKeyAuthentication",
            "PARAMETERS": {"api_key": "lazy-key"},
        },
    }
    with mock.patch("getresponse_node.client_handler", ClientHandler()):
        client = DefaultClient()
        assert isinstance(client, GetResponseClient)
        assert client.authentication.get_headers() == {"X-Auth-Token": "api-key lazy-key"}

"""API key authentication for GetResponse."""

from .base import BaseAuthentication


class ApiKeyAuthentication(BaseAuthentication):
    """Authenticate with an API key generated in the GetResponse account."""

    def __init__(self, api_key: str):
        """Configure the API key."""
        self._api_key = api_key

    def get_headers(self) -> dict[str, str]:
        """Use the X-Auth-Token header expected by the v3 API."""
        return {"X-Auth-Token": f"api-key {self._api_key}"}

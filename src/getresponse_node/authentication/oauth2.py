"""OAuth2 authentication for GetResponse."""

from .base import BaseAuthentication


class OAuth2Authentication(BaseAuthentication):
    """
    Authenticate with an OAuth2 access token.

    Obtaining and refreshing the token is left to the caller, this backend
    only sends it.
    """

    def __init__(self, access_token: str):
        """Configure the access token."""
        self._access_token = access_token

    def get_headers(self) -> dict[str, str]:
        """Use a bearer Authorization header."""
        return {"Authorization": f"Bearer {self._access_token}"}

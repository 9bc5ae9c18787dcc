"""GetResponse API client."""

import logging

import requests

from getresponse_node.authentication.base import BaseAuthentication
from getresponse_node.exceptions import GetResponseApiError
from getresponse_node.pagination import fetch_all_items

logger = logging.getLogger(__name__)

GETRESPONSE_API_URL = "https://api.getresponse.com/v3"


class GetResponseClient:
    """
    Client for the GetResponse v3 REST API.

    Every outbound call of the node goes through `request`, which:
    - prefixes the path with the API base URL,
    - adds the headers of the configured authentication backend,
    - decodes the JSON response.

    HTTP and network failures are not handled here, they are re-raised as
    `GetResponseApiError` for the caller to deal with.
    """

    _header_accept = "application/json"

    def __init__(
        self,
        authentication: BaseAuthentication,
        base_url: str = GETRESPONSE_API_URL,
        timeout: int = 10,
        max_pages: int | None = None,
    ):
        """Configure the client."""
        self.authentication = authentication
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self.max_pages = max_pages

    @property
    def _headers(self):
        """Get the HTTP headers sent with every request."""
        return {
            "Accept": self._header_accept,
            **self.authentication.get_headers(),
        }

    def request(self, method: str, path: str, body: dict | None = None, query: dict | None = None):
        """Issue one request against the API and return the decoded response."""
        url = f"{self.base_url}{path}"
        logger.debug("GetResponse request %s %s query keys=%s", method, path, sorted(query or {}))
        try:
            response = requests.request(
                method,
                url,
                json=body or None,
                params=query or None,
                headers=self._headers,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as err:
            status_code = err.response.status_code if err.response is not None else None
            raise GetResponseApiError(
                f"GetResponse request {method} {path} failed: {err}",
                status_code=status_code,
                response=_decode_error(err.response),
            ) from err

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as err:
            raise GetResponseApiError(
                f"GetResponse request {method} {path} returned an invalid JSON body",
                status_code=response.status_code,
            ) from err

    def request_all_items(self, method: str, path: str, body: dict | None = None, query: dict | None = None):
        """Issue as many requests as needed to retrieve every page of a listing."""
        return fetch_all_items(self, method, path, body=body, query=query, max_pages=self.max_pages)


def _decode_error(response):
    """Decode the JSON body of an error response, anything else decodes to an empty dict."""
    if response is None or not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return {}

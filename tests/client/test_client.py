"""Test the GetResponse API client."""

import logging

import pytest
import responses
from requests.exceptions import ConnectionError as RequestsConnectionError
from responses import matchers

from getresponse_node.exceptions import GetResponseApiError

API_URL = "https://api.getresponse.com/v3"


@responses.activate
def test_request_sends_authentication_headers(getresponse_client):
    """Every request carries the authentication and accept headers."""
    responses.add(
        responses.GET,
        f"{API_URL}/contacts/abc",
        json={"contactId": "abc"},
        status=200,
        match=[matchers.header_matcher({"X-Auth-Token": "api-key test-api-key", "Accept": "application/json"})],
    )

    assert getresponse_client.request("GET", "/contacts/abc") == {"contactId": "abc"}


@responses.activate
def test_request_sends_json_body_and_query(getresponse_client):
    """The body is sent as JSON and the query as URL parameters."""
    responses.add(
        responses.POST,
        f"{API_URL}/contacts/abc",
        json={"contactId": "abc", "name": "New"},
        status=200,
        match=[
            matchers.json_params_matcher({"name": "New"}),
            matchers.query_param_matcher({"fields": "name"}),
        ],
    )

    response = getresponse_client.request("POST", "/contacts/abc", {"name": "New"}, {"fields": "name"})

    assert response == {"contactId": "abc", "name": "New"}


@responses.activate
def test_request_empty_body(getresponse_client):
    """An empty response body decodes to an empty dict."""
    responses.add(responses.DELETE, f"{API_URL}/contacts/abc", body="", status=204)

    assert getresponse_client.request("DELETE", "/contacts/abc") == {}


@responses.activate
def test_request_api_error(getresponse_client):
    """HTTP errors are raised as GetResponseApiError with the decoded body."""
    error = {"httpStatus": 404, "code": 1013, "message": "Contact not found"}
    responses.add(responses.GET, f"{API_URL}/contacts/missing", json=error, status=404)

    with pytest.raises(GetResponseApiError, match="GetResponse request GET /contacts/missing failed") as exc_info:
        getresponse_client.request("GET", "/contacts/missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.response == error


@responses.activate
def test_request_network_error(getresponse_client):
    """Network errors are raised as GetResponseApiError without status."""
    responses.add(
        responses.GET,
        f"{API_URL}/contacts/abc",
        body=RequestsConnectionError("connection refused"),
    )

    with pytest.raises(GetResponseApiError) as exc_info:
        getresponse_client.request("GET", "/contacts/abc")

    assert exc_info.value.status_code is None
    assert exc_info.value.response == {}


@responses.activate
def test_request_invalid_json_body(getresponse_client):
    """A successful response with a body which is not JSON is reported."""
    responses.add(responses.GET, f"{API_URL}/contacts/abc", body="<html>maintenance</html>", status=200)

    with pytest.raises(GetResponseApiError, match="returned an invalid JSON body") as exc_info:
        getresponse_client.request("GET", "/contacts/abc")

    assert exc_info.value.status_code == 200


@responses.activate
def test_request_logs_query_keys_only(getresponse_client, caplog):
    """Query values, which may hold contact data, are not logged."""
    responses.add(responses.GET, f"{API_URL}/contacts", json=[], status=200)

    with caplog.at_level(logging.DEBUG, logger="getresponse_node.client"):
        getresponse_client.request("GET", "/contacts", query={"query[email]": "secret@example.com"})

    assert "query[email]" in caplog.text
    assert "secret@example.com" not in caplog.text

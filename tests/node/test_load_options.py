"""Test the option loaders of the GetResponse node."""

import pytest
import responses
from rest_framework.exceptions import ValidationError

from getresponse_node.node import GetResponseNode

API_URL = "https://api.getresponse.com/v3"


@responses.activate
def test_get_campaigns(getresponse_client):
    """Campaigns are listed as name/value pairs."""
    responses.add(
        responses.GET,
        f"{API_URL}/campaigns",
        json=[{"campaignId": "V", "name": "newsletter", "isDefault": "true"}, {"campaignId": "W", "name": "promo"}],
        status=200,
    )

    assert GetResponseNode().get_campaigns(getresponse_client) == [
        {"name": "newsletter", "value": "V"},
        {"name": "promo", "value": "W"},
    ]


@responses.activate
def test_get_tags(getresponse_client):
    """Tags are listed as name/value pairs."""
    responses.add(responses.GET, f"{API_URL}/tags", json=[{"tagId": "t1", "name": "vip"}], status=200)

    assert GetResponseNode().load_options("getTags", getresponse_client) == [{"name": "vip", "value": "t1"}]


@responses.activate
def test_get_custom_fields(getresponse_client):
    """Custom fields are listed as name/value pairs."""
    responses.add(
        responses.GET,
        f"{API_URL}/custom-fields",
        json=[{"customFieldId": "f1", "name": "color", "fieldType": "text"}],
        status=200,
    )

    assert GetResponseNode().load_options("getCustomFields", getresponse_client) == [
        {"name": "color", "value": "f1"}
    ]


@responses.activate
def test_get_campaigns_invalid_payload(getresponse_client):
    """Campaigns without id are rejected."""
    responses.add(responses.GET, f"{API_URL}/campaigns", json=[{"name": "newsletter"}], status=200)

    with pytest.raises(ValidationError):
        GetResponseNode().get_campaigns(getresponse_client)


def test_description_references_option_loaders():
    """Every option loader referenced by the description exists."""
    node = GetResponseNode()
    methods = set()

    def collect(properties):
        for prop in properties:
            method = prop.get("typeOptions", {}).get("loadOptionsMethod")
            if method:
                methods.add(method)
            collect(prop.get("options", []))
            collect(prop.get("values", []))

    collect(node.description["properties"])

    assert methods == {"getCampaigns", "getTags", "getCustomFields"}

"""GetResponse workflow node."""

import logging

from getresponse_node.context import ExecutionContext, ItemParameters
from getresponse_node.description import CONTACT_FIELDS, CONTACT_OPERATIONS, get_defaults
from getresponse_node.handler import DEFAULT_AUTHENTICATION
from getresponse_node.operations import Operation, build_request
from getresponse_node.schemas import (
    CampaignSerializer,
    CustomFieldSerializer,
    TagSerializer,
    validate_many,
    validate_page,
)

logger = logging.getLogger(__name__)

# Operations whose endpoint returns no usable body
SUCCESS_OPERATIONS = frozenset([Operation.CREATE, Operation.DELETE])


class GetResponseNode:
    """
    GetResponse node.

    Handles:
    - Contact creation, retrieval, listing, update and deletion
    - Dropdown options for campaigns, tags and custom fields
    """

    description = {
        "displayName": "GetResponse",
        "name": "getResponse",
        "group": ["input"],
        "version": 1,
        "description": "Consume GetResponse API.",
        "credentials": [
            {"name": "getResponseApi", "required": True, "displayOptions": {"show": {"authentication": ["apiKey"]}}},
            {
                "name": "getResponseOAuth2Api",
                "required": True,
                "displayOptions": {"show": {"authentication": ["oAuth2"]}},
            },
        ],
        "properties": [
            {
                "displayName": "Authentication",
                "name": "authentication",
                "type": "options",
                "options": [
                    {"name": "API Key", "value": "apiKey"},
                    {"name": "OAuth2", "value": "oAuth2"},
                ],
                "default": "apiKey",
            },
            {
                "displayName": "Resource",
                "name": "resource",
                "type": "options",
                "options": [{"name": "Contact", "value": "contact"}],
                "default": "contact",
            },
            *CONTACT_OPERATIONS,
            *CONTACT_FIELDS,
        ],
    }

    def get_campaigns(self, client) -> list[dict]:
        """List the campaigns to let the user pick one."""
        campaigns = validate_many(CampaignSerializer, client.request("GET", "/campaigns"))
        return [{"name": campaign["name"], "value": campaign["campaignId"]} for campaign in campaigns]

    def get_tags(self, client) -> list[dict]:
        """List the tags to let the user pick some."""
        tags = validate_many(TagSerializer, client.request("GET", "/tags"))
        return [{"name": tag["name"], "value": tag["tagId"]} for tag in tags]

    def get_custom_fields(self, client) -> list[dict]:
        """List the custom fields to let the user pick one."""
        custom_fields = validate_many(CustomFieldSerializer, client.request("GET", "/custom-fields"))
        return [{"name": field["name"], "value": field["customFieldId"]} for field in custom_fields]

    def load_options(self, method: str, client) -> list[dict]:
        """Run an option loader by the name referenced in the description."""
        loaders = {
            "getCampaigns": self.get_campaigns,
            "getTags": self.get_tags,
            "getCustomFields": self.get_custom_fields,
        }
        return loaders[method](client)

    def execute(self, context: ExecutionContext) -> list[dict]:
        """
        Run the selected operation once per input item.

        Args:
            context: Host execution context

        Returns:
            list: Output items, listings are flattened

        Raises:
            UnsupportedOperationError: If the resource/operation pair is unknown
            GetResponseApiError: If a call to the API fails

        """
        items = context.get_input_data()
        resource = context.get_node_parameter("resource", 0, "contact")
        operation = context.get_node_parameter("operation", 0, "get")
        tzinfo = context.get_timezone()
        defaults = get_defaults(self.description["properties"], resource, operation)
        client = context.get_client(context.get_node_parameter("authentication", 0, DEFAULT_AUTHENTICATION))

        results = []
        for index in range(len(items)):
            api_request = build_request(resource, operation, ItemParameters(context, index, defaults), tzinfo)

            if api_request.return_all:
                response = client.request_all_items(
                    api_request.method, api_request.path, api_request.body, api_request.query
                )
            else:
                response = client.request(api_request.method, api_request.path, api_request.body, api_request.query)
                if operation == Operation.GET_ALL:
                    response = validate_page(response)

            if operation in SUCCESS_OPERATIONS:
                response = {"success": True}

            if isinstance(response, list):
                results.extend(response)
            else:
                results.append(response)

        logger.debug("GetResponse %s %s produced %d items", resource, operation, len(results))
        return results

"""Translation of node operations into GetResponse API requests."""

from dataclasses import dataclass, field
from enum import StrEnum

from getresponse_node.exceptions import UnsupportedOperationError
from getresponse_node.query import translate_query


class Resource(StrEnum):
    """Resources exposed by the node."""

    CONTACT = "contact"


class Operation(StrEnum):
    """Operations available on a resource."""

    CREATE = "create"
    DELETE = "delete"
    GET = "get"
    GET_ALL = "getAll"
    UPDATE = "update"


@dataclass(frozen=True)
class ApiRequest:
    """One outbound call of the node, built for a single input item."""

    method: str
    path: str
    body: dict = field(default_factory=dict)
    query: dict = field(default_factory=dict)
    return_all: bool = False


def _custom_field_values(fields: dict, coerce: bool) -> list[dict] | None:
    """Extract the custom field values of the `customFieldsUi` collection."""
    custom_fields_ui = fields.get("customFieldsUi") or {}
    values = custom_fields_ui.get("customFieldValues")
    if values is None:
        return None
    if not coerce:
        return list(values)
    return [
        {**value, "value": value["value"] if isinstance(value["value"], list) else [value["value"]]}
        for value in values
    ]


def _contact_body(body: dict, fields: dict, coerce: bool) -> dict:
    """Merge the user selected fields in a contact body."""
    body = {**body, **fields}
    custom_field_values = _custom_field_values(fields, coerce)
    if custom_field_values is not None:
        body["customFieldValues"] = custom_field_values
        body.pop("customFieldsUi", None)
    return body


def build_create_contact(parameters, tzinfo=None) -> ApiRequest:
    """Create a contact, https://apireference.getresponse.com/#operation/createContact."""
    body = {
        "email": parameters.get("email"),
        "campaign": {"campaignId": parameters.get("campaignId")},
    }
    additional_fields = parameters.get("additionalFields") or {}
    return ApiRequest("POST", "/contacts", body=_contact_body(body, additional_fields, coerce=True))


def build_delete_contact(parameters, tzinfo=None) -> ApiRequest:
    """Delete a contact, https://apireference.getresponse.com/#operation/deleteContact."""
    options = parameters.get("options") or {}
    return ApiRequest("DELETE", f"/contacts/{parameters.get('contactId')}", query=dict(options))


def build_get_contact(parameters, tzinfo=None) -> ApiRequest:
    """Get a contact, https://apireference.getresponse.com/#operation/getContactById."""
    options = parameters.get("options") or {}
    return ApiRequest("GET", f"/contacts/{parameters.get('contactId')}", query=dict(options))


def build_get_all_contacts(parameters, tzinfo=None) -> ApiRequest:
    """List contacts, https://apireference.getresponse.com/#operation/getContactList."""
    query = translate_query(parameters.get("options") or {}, tzinfo)
    return_all = bool(parameters.get("returnAll", False))
    if not return_all:
        query["perPage"] = parameters.get("limit", 20)
    return ApiRequest("GET", "/contacts", query=query, return_all=return_all)


def build_update_contact(parameters, tzinfo=None) -> ApiRequest:
    """Update a contact, https://apireference.getresponse.com/#operation/updateContact."""
    update_fields = parameters.get("updateFields") or {}
    return ApiRequest(
        "POST",
        f"/contacts/{parameters.get('contactId')}",
        body=_contact_body({}, update_fields, coerce=False),
    )


REQUEST_BUILDERS = {
    (Resource.CONTACT, Operation.CREATE): build_create_contact,
    (Resource.CONTACT, Operation.DELETE): build_delete_contact,
    (Resource.CONTACT, Operation.GET): build_get_contact,
    (Resource.CONTACT, Operation.GET_ALL): build_get_all_contacts,
    (Resource.CONTACT, Operation.UPDATE): build_update_contact,
}


def build_request(resource, operation, parameters, tzinfo=None) -> ApiRequest:
    """
    Build the API request of an operation.

    Args:
        resource: Resource tag, e.g. "contact"
        operation: Operation tag, e.g. "getAll"
        parameters: Parameter source exposing `get(name, default=None)`
        tzinfo: Timezone used to format date filters

    Returns:
        ApiRequest: The request to issue

    Raises:
        UnsupportedOperationError: If the pair is not supported, nothing is sent

    """
    try:
        builder = REQUEST_BUILDERS[(Resource(resource), Operation(operation))]
    except (ValueError, KeyError) as err:
        raise UnsupportedOperationError(resource, operation) from err
    return builder(parameters, tzinfo)

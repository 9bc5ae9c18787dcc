"""Declarative description of the contact resource parameters."""

CONTACT_OPERATIONS = [
    {
        "displayName": "Operation",
        "name": "operation",
        "type": "options",
        "displayOptions": {"show": {"resource": ["contact"]}},
        "options": [
            {"name": "Create", "value": "create", "description": "Create a new contact"},
            {"name": "Delete", "value": "delete", "description": "Delete a contact"},
            {"name": "Get", "value": "get", "description": "Get a contact"},
            {"name": "Get All", "value": "getAll", "description": "Get all contacts"},
            {"name": "Update", "value": "update", "description": "Update contact properties"},
        ],
        "default": "get",
    },
]


CONTACT_ORIGINS = (
    "api",
    "copy",
    "email",
    "forward",
    "import",
    "iphone",
    "landing_page",
    "leads",
    "panel",
    "sale",
    "survey",
    "webinar",
    "www",
)


def _show(*operations):
    return {"show": {"resource": ["contact"], "operation": list(operations)}}


CUSTOM_FIELDS_UI = {
    "displayName": "Custom Fields",
    "name": "customFieldsUi",
    "type": "fixedCollection",
    "typeOptions": {"multipleValues": True},
    "default": {},
    "options": [
        {
            "name": "customFieldValues",
            "displayName": "Custom Field",
            "values": [
                {
                    "displayName": "Field ID",
                    "name": "customFieldId",
                    "type": "options",
                    "typeOptions": {"loadOptionsMethod": "getCustomFields"},
                    "default": "",
                    "description": "The ID of the field to add custom field to.",
                },
                {
                    "displayName": "Value",
                    "name": "value",
                    "type": "string",
                    "default": "",
                    "description": "The value to set on custom field.",
                },
            ],
        },
    ],
}

CONTACT_PROFILE_FIELDS = [
    {"displayName": "Day Of Cycle", "name": "dayOfCycle", "type": "string", "default": ""},
    {"displayName": "IP Address", "name": "ipAddress", "type": "string", "default": ""},
    {"displayName": "Name", "name": "name", "type": "string", "default": ""},
    {"displayName": "Note", "name": "note", "type": "string", "default": ""},
    {"displayName": "Scoring", "name": "scoring", "type": "number", "default": ""},
    {
        "displayName": "Tag IDs",
        "name": "tags",
        "type": "multiOptions",
        "typeOptions": {"loadOptionsMethod": "getTags"},
        "default": [],
    },
]

CONTACT_FIELDS = [
    # contact:create
    {
        "displayName": "Email",
        "name": "email",
        "type": "string",
        "required": True,
        "displayOptions": _show("create"),
        "default": "",
    },
    {
        "displayName": "Campaign ID",
        "name": "campaignId",
        "type": "options",
        "typeOptions": {"loadOptionsMethod": "getCampaigns"},
        "required": True,
        "displayOptions": _show("create"),
        "default": "",
    },
    {
        "displayName": "Additional Fields",
        "name": "additionalFields",
        "type": "collection",
        "placeholder": "Add Field",
        "displayOptions": _show("create"),
        "default": {},
        "options": [CUSTOM_FIELDS_UI, *CONTACT_PROFILE_FIELDS],
    },
    # contact:delete, contact:get, contact:update
    {
        "displayName": "Contact ID",
        "name": "contactId",
        "type": "string",
        "required": True,
        "displayOptions": _show("delete", "get", "update"),
        "default": "",
        "description": "ID of contact.",
    },
    {
        "displayName": "Options",
        "name": "options",
        "type": "collection",
        "placeholder": "Add Field",
        "displayOptions": _show("delete"),
        "default": {},
        "options": [
            {
                "displayName": "IP Address",
                "name": "ipAddress",
                "type": "string",
                "default": "",
                "description": "This makes it possible to pass the IP from which the contact unsubscribed.",
            },
            {
                "displayName": "Message ID",
                "name": "messageId",
                "type": "string",
                "default": "",
                "description": "The ID of a message (such as a newsletter, an autoresponder, or an RSS-newsletter).",
            },
        ],
    },
    {
        "displayName": "Options",
        "name": "options",
        "type": "collection",
        "placeholder": "Add Field",
        "displayOptions": _show("get"),
        "default": {},
        "options": [
            {
                "displayName": "Fields",
                "name": "fields",
                "type": "string",
                "default": "",
                "description": "List of fields that should be returned. Field names should be separated by comma",
            },
        ],
    },
    # contact:getAll
    {
        "displayName": "Return All",
        "name": "returnAll",
        "type": "boolean",
        "displayOptions": _show("getAll"),
        "default": False,
        "description": "If all results should be returned or only up to a given limit.",
    },
    {
        "displayName": "Limit",
        "name": "limit",
        "type": "number",
        "displayOptions": {"show": {"resource": ["contact"], "operation": ["getAll"], "returnAll": [False]}},
        "typeOptions": {"minValue": 1, "maxValue": 100},
        "default": 20,
        "description": "How many results to return.",
    },
    {
        "displayName": "Options",
        "name": "options",
        "type": "collection",
        "placeholder": "Add Field",
        "displayOptions": _show("getAll"),
        "default": {},
        "options": [
            {
                "displayName": "Campaign ID",
                "name": "campaignId",
                "type": "string",
                "default": "",
                "description": "Search contacts by campaign ID.",
            },
            {"displayName": "Change On From", "name": "changeOnFrom", "type": "dateTime", "default": ""},
            {"displayName": "Change On To", "name": "changeOnTo", "type": "dateTime", "default": ""},
            {"displayName": "Created On From", "name": "createdOnFrom", "type": "dateTime", "default": ""},
            {"displayName": "Created On To", "name": "createdOnTo", "type": "dateTime", "default": ""},
            {
                "displayName": "Exact Match",
                "name": "exactMatch",
                "type": "boolean",
                "default": False,
                "description": "When set, search parameters are compared exactly instead of partially.",
            },
            {
                "displayName": "Fields",
                "name": "fields",
                "type": "string",
                "default": "",
                "description": "List of fields that should be returned. Field names should be separated by comma",
            },
            {"displayName": "Name", "name": "name", "type": "string", "default": ""},
            {
                "displayName": "Origin",
                "name": "origin",
                "type": "options",
                "default": "",
                "options": [{"name": origin, "value": origin} for origin in CONTACT_ORIGINS],
            },
            {
                "displayName": "Sort By",
                "name": "sortBy",
                "type": "options",
                "default": "",
                "options": [
                    {"name": "Campaign ID", "value": "campaignId"},
                    {"name": "Changed On", "value": "changedOn"},
                    {"name": "Created On", "value": "createdOn"},
                    {"name": "Email", "value": "email"},
                ],
            },
            {
                "displayName": "Sort Order",
                "name": "sortOrder",
                "type": "options",
                "default": "",
                "options": [
                    {"name": "ASC", "value": "ASC"},
                    {"name": "DESC", "value": "DESC"},
                ],
            },
        ],
    },
    # contact:update
    {
        "displayName": "Update Fields",
        "name": "updateFields",
        "type": "collection",
        "placeholder": "Add Field",
        "displayOptions": _show("update"),
        "default": {},
        "options": [
            {
                "displayName": "Campaign ID",
                "name": "campaignId",
                "type": "options",
                "typeOptions": {"loadOptionsMethod": "getCampaigns"},
                "default": "",
            },
            CUSTOM_FIELDS_UI,
            {"displayName": "Email", "name": "email", "type": "string", "default": ""},
            *CONTACT_PROFILE_FIELDS,
        ],
    },
]


def get_defaults(properties, resource, operation) -> dict:
    """Return the default values of the top level properties shown for an operation."""
    defaults = {}
    for prop in properties:
        show = prop.get("displayOptions", {}).get("show", {})
        if resource not in show.get("resource", [resource]) or operation not in show.get("operation", [operation]):
            continue
        defaults.setdefault(prop["name"], prop.get("default"))
    return defaults

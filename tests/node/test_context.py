"""Test the in process execution context."""

from unittest import mock
from zoneinfo import ZoneInfo

from getresponse_node.context import ItemParameters, ItemsExecutionContext


def test_get_node_parameter_priority():
    """Item values take precedence over shared values, then defaults."""
    context = ItemsExecutionContext(
        [{}, {}],
        {"contactId": "shared", "__items__": [{"contactId": "first"}]},
        client=mock.Mock(),
    )

    assert context.get_node_parameter("contactId", 0) == "first"
    assert context.get_node_parameter("contactId", 1) == "shared"
    assert context.get_node_parameter("options", 1, {}) == {}


def test_get_timezone_default(settings):
    """Without timezone, the Django default timezone is used."""
    settings.TIME_ZONE = "Europe/Paris"
    context = ItemsExecutionContext([], {}, client=mock.Mock())

    assert str(context.get_timezone()) == "Europe/Paris"


def test_get_timezone_from_name():
    """A timezone name is converted to a tzinfo."""
    context = ItemsExecutionContext([], {}, client=mock.Mock(), timezone="Asia/Tokyo")

    assert context.get_timezone() == ZoneInfo("Asia/Tokyo")


def test_get_client_from_handler():
    """Without client, the client of the authentication method comes from the handler."""
    context = ItemsExecutionContext([], {})

    with mock.patch("getresponse_node.client_handler") as mock_handler:
        client = context.get_client("oAuth2")

    mock_handler.assert_called_once_with("oAuth2")
    assert client is mock_handler.return_value


def test_get_client_given():
    """A client given to the context is used whatever the authentication method."""
    client = mock.Mock()
    context = ItemsExecutionContext([], {}, client=client)

    assert context.get_client("oAuth2") is client


def test_item_parameters_defaults():
    """The item parameters fall back on the description defaults."""
    context = ItemsExecutionContext([{}], {"limit": 10}, client=mock.Mock())
    parameters = ItemParameters(context, 0, defaults={"limit": 20, "returnAll": False})

    assert parameters.get("limit") == 10
    assert parameters.get("returnAll") is False
    assert parameters.get("options", {}) == {}
    assert parameters.get("unknown") is None

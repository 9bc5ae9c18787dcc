"""Execution contract between the node and the host running it."""

from typing import Any, Protocol
from zoneinfo import ZoneInfo

from django.utils import timezone as django_timezone

PER_ITEM_KEY = "__items__"

_MISSING = object()


class ExecutionContext(Protocol):
    """What a host must provide to execute the node."""

    def get_input_data(self) -> list[dict]:
        """Return the input items."""

    def get_node_parameter(self, name: str, index: int, default: Any = None) -> Any:
        """Return the value of a parameter resolved for the item at `index`."""

    def get_timezone(self):
        """Return the timezone the workflow runs in."""

    def get_client(self, authentication: str):
        """Return a client authenticated with the given method ("apiKey" or "oAuth2")."""


class ItemsExecutionContext:
    """
    In process execution context.

    Parameters are read, in order of priority, from:
    * `parameters["__items__"][index]`, the values specific to one item,
    * `parameters`, the values shared by all items,
    * the default given by the caller.
    """

    def __init__(self, items, parameters, client=None, timezone=None):
        """Initialize the context, clients come from the client handler if none is given."""
        self.items = list(items)
        self.parameters = dict(parameters)
        self.client = client
        self._timezone = timezone

    def get_client(self, authentication):
        """Return the given client, or the configured one of the authentication method."""
        if self.client is not None:
            return self.client
        from getresponse_node import client_handler  # noqa: PLC0415

        return client_handler(authentication)

    def get_input_data(self):
        """Return the input items."""
        return self.items

    def get_node_parameter(self, name, index, default=None):
        """Resolve a parameter for the item at `index`."""
        per_item = self.parameters.get(PER_ITEM_KEY) or []
        if index < len(per_item) and name in per_item[index]:
            return per_item[index][name]
        return self.parameters.get(name, default)

    def get_timezone(self):
        """Return the configured timezone, or the Django default one."""
        if self._timezone is None:
            return django_timezone.get_default_timezone()
        if isinstance(self._timezone, str):
            return ZoneInfo(self._timezone)
        return self._timezone


class ItemParameters:
    """Parameter source of one item, as consumed by the request builders."""

    def __init__(self, context: ExecutionContext, index: int, defaults: dict | None = None):
        """Bind the context to an item index."""
        self._context = context
        self._index = index
        self._defaults = defaults or {}

    def get(self, name, default=_MISSING):
        """Resolve a parameter, falling back on the node description default."""
        if default is _MISSING:
            default = self._defaults.get(name)
        return self._context.get_node_parameter(name, self._index, default)

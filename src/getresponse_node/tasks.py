"""GetResponse node tasks module."""

from celery import shared_task

from getresponse_node.context import ItemsExecutionContext
from getresponse_node.node import GetResponseNode


@shared_task
def execute_contact_operation(
    operation: str,
    items: list[dict],
    parameters: dict | None = None,
    timezone: str | None = None,
):
    """Run a contact operation for a batch of items with the configured clients."""
    parameters = {**(parameters or {}), "resource": "contact", "operation": operation}
    context = ItemsExecutionContext(items, parameters, timezone=timezone)
    return GetResponseNode().execute(context)

"""Page index pagination over GetResponse listings."""

import logging

from getresponse_node.schemas import validate_page

logger = logging.getLogger(__name__)

PAGE_SIZE = 100


def fetch_all_items(  # noqa: PLR0913
    client,
    method: str,
    path: str,
    body: dict | None = None,
    query: dict | None = None,
    page_size: int = PAGE_SIZE,
    max_pages: int | None = None,
) -> list[dict]:
    """
    Fetch every page of a listing and return the items in page order.

    Pages are requested with `page` starting at 1 and a fixed `perPage`. The
    loop ends on the first page holding fewer than `page_size` items, or once
    `max_pages` pages were fetched when a bound is given.

    Args:
        client: Object exposing `request(method, path, body, query)`
        method: HTTP method of the listing
        path: Listing path, e.g. "/contacts"
        body: Request body, usually empty
        query: Translated query string, left untouched
        page_size: Number of items requested per page
        max_pages: Optional upper bound on the number of requests

    Returns:
        list: Items of all pages

    """
    items = []
    page = 1
    while True:
        page_query = {**(query or {}), "page": page, "perPage": page_size}
        page_items = validate_page(client.request(method, path, body, page_query))
        logger.debug("Fetched page %d of %s with %d items", page, path, len(page_items))
        items.extend(page_items)

        if len(page_items) < page_size:
            return items

        if max_pages is not None and page >= max_pages:
            logger.warning("Stopped fetching %s after %d pages, more items may be available", path, page)
            return items

        page += 1

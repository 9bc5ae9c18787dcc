"""Translation of the contact listing options into GetResponse query strings."""

from datetime import datetime

from django.utils import timezone as django_timezone
from django.utils.dateparse import parse_datetime

# Options sent as top level parameters instead of `query[...]` filters
NOT_QUERY_KEYS = frozenset(["sortBy", "sortOrder", "additionalFlags", "fields", "exactMatch"])

DATE_KEYS = {
    "createdOnFrom": "query[createdOn][from]",
    "createdOnTo": "query[createdOn][to]",
    "changeOnFrom": "query[changeOn][from]",
    "changeOnTo": "query[changeOn][to]",
}


def format_date(value, tzinfo) -> str:
    """
    Format a date option as an ISO 8601 timestamp with its UTC offset.

    Naive values are read as wall time in `tzinfo`, aware values are converted
    to `tzinfo`. The offset has no colon, e.g. "2020-11-01T09:00:00+0100".
    """
    if not isinstance(value, datetime):
        parsed = parse_datetime(str(value))
        if parsed is None:
            raise ValueError(f"Invalid date {value!r}")
        value = parsed

    if django_timezone.is_naive(value):
        value = django_timezone.make_aware(value, tzinfo)
    else:
        value = value.astimezone(tzinfo)
    return value.strftime("%Y-%m-%dT%H:%M:%S%z")


def translate_query(options: dict, tzinfo=None) -> dict:
    """
    Build the query string of a contact listing from the raw options.

    Args:
        options: Options as selected by the user, left untouched
        tzinfo: Timezone of the date options, defaults to settings.TIME_ZONE

    Returns:
        dict: A new query string mapping

    """
    tzinfo = tzinfo or django_timezone.get_default_timezone()
    query = {}
    for key, value in options.items():
        if key in NOT_QUERY_KEYS:
            continue
        if key in DATE_KEYS:
            query[DATE_KEYS[key]] = format_date(value, tzinfo)
        else:
            query[f"query[{key}]"] = value

    if options.get("fields"):
        query["fields"] = options["fields"]

    if options.get("sortBy"):
        query[f"sort[{options['sortBy']}]"] = options.get("sortOrder") or "ASC"

    if options.get("exactMatch") is True:
        query["additionalFlags"] = "exactMatch"
    elif "additionalFlags" in options:
        query["additionalFlags"] = options["additionalFlags"]

    return query

"""Query parameters and URL for the Gamma /events endpoint."""

from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import urlencode

from gammafetch.errors import RequestConstructionError

EVENTS_PATH = "/events"
SORT_KEY = "id"

# Ordered (name, value) pairs; names may repeat
QueryParams = list[tuple[str, str]]


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


def _require_int(name: str, value: object) -> int:
    # bool is an int subclass but never a valid id/offset/limit
    if isinstance(value, bool) or not isinstance(value, int):
        raise RequestConstructionError(f"{name} must be an integer, got {value!r}")
    return value


def ids_query(ids: Sequence[int]) -> QueryParams:
    """One ``id`` parameter per id, in input order."""
    return [("id", str(_require_int("id", i))) for i in ids]


def page_query(offset: int, limit: int, ascending: bool) -> QueryParams:
    """Page of events ordered by id."""
    offset = _require_int("offset", offset)
    limit = _require_int("limit", limit)
    if offset < 0:
        raise RequestConstructionError(f"offset must be >= 0, got {offset}")
    if limit <= 0:
        raise RequestConstructionError(f"limit must be > 0, got {limit}")
    return [
        ("offset", str(offset)),
        ("limit", str(limit)),
        ("ascending", _bool_param(ascending)),
        ("order", SORT_KEY),
        ("sortBy", SORT_KEY),
    ]


def active_page_query(offset: int, limit: int, ascending: bool) -> QueryParams:
    """Page of non-closed events.

    Filters on ``closed=false`` rather than ``active=true``: Polymarket does not
    maintain the ``active`` column reliably.
    """
    params = page_query(offset, limit, ascending)
    params.append(("closed", "false"))
    return params


def events_url(base_url: str, params: QueryParams) -> str:
    """Compose ``{base_url}/events`` with encoded params; no ``?`` when params is empty."""
    url = base_url.rstrip("/") + EVENTS_PATH
    if params:
        url = f"{url}?{urlencode(params)}"
    return url

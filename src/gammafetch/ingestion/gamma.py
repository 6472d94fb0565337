"""Polymarket Gamma API client - event discovery and metadata."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import httpx

from gammafetch.errors import HTTPStatusError, RequestConstructionError, TransportError
from gammafetch.ingestion.base import RequestSender
from gammafetch.ingestion.decode import decode_events, read_body, read_error_body
from gammafetch.ingestion.query import (
    QueryParams,
    active_page_query,
    events_url,
    ids_query,
    page_query,
)
from gammafetch.ingestion.validate import validate_events
from gammafetch.models import EventsResponse

if TYPE_CHECKING:
    from gammafetch.config.settings import Settings

GAMMA_API_BASE = "https://gamma-api.polymarket.com"
DEFAULT_TIMEOUT = 30.0

_REQUEST_HEADERS = {"Accept-Encoding": "gzip"}


class GammaClient:
    """Read-only client for the Gamma ``/events`` endpoint.

    Each fetch issues exactly one GET and returns validated events, or raises a
    :class:`gammafetch.errors.GammaError` subclass; there are no retries and no
    partial results.

    The client keeps only read-only configuration and its HTTP client, so one
    instance may be shared across threads as long as the HTTP client is safe for
    concurrent use (``httpx.Client`` is). Pass ``http_client`` to supply your own
    client (``timeout`` and ``transport`` are then ignored and the caller keeps
    ownership), or ``transport`` to swap the transport of the client built here.
    """

    def __init__(
        self,
        *,
        base_url: str = GAMMA_API_BASE,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
        http_client: RequestSender | None = None,
    ) -> None:
        self.base_url = (base_url or GAMMA_API_BASE).rstrip("/")
        self.timeout = timeout
        self._owned: httpx.Client | None = None
        if http_client is not None:
            self._http: RequestSender = http_client
        else:
            self._owned = httpx.Client(
                timeout=timeout or DEFAULT_TIMEOUT,
                transport=transport,
                follow_redirects=True,
            )
            self._http = self._owned

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> GammaClient:
        return cls(
            base_url=settings.gamma_api_base,
            timeout=settings.gamma_timeout_sec,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client built by this instance. A caller-supplied one is left open."""
        if self._owned is not None:
            self._owned.close()

    def __enter__(self) -> GammaClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch_events_by_ids(self, ids: Sequence[int]) -> EventsResponse:
        """Fetch events by id. No local limit on len(ids); the service may cap it."""
        operation = "fetch_events_by_ids"
        params = self._params(operation, ids_query, ids)
        return self._fetch_events(operation, params)

    def fetch_events_page(
        self, offset: int, limit: int, ascending: bool = False
    ) -> EventsResponse:
        """Fetch a page of events ordered by id (newest first unless ``ascending``)."""
        operation = "fetch_events_page"
        params = self._params(operation, page_query, offset, limit, ascending)
        return self._fetch_events(operation, params)

    def fetch_active_events_page(
        self, offset: int, limit: int, ascending: bool = False
    ) -> EventsResponse:
        """Like :meth:`fetch_events_page` but only events that are not closed."""
        operation = "fetch_active_events_page"
        params = self._params(operation, active_page_query, offset, limit, ascending)
        return self._fetch_events(operation, params)

    @staticmethod
    def _params(
        operation: str, build: Callable[..., QueryParams], *args: object
    ) -> QueryParams:
        try:
            return build(*args)
        except RequestConstructionError as e:
            raise RequestConstructionError(str(e), operation=operation) from e

    def _fetch_events(self, operation: str, params: QueryParams) -> EventsResponse:
        url = events_url(self.base_url, params)
        try:
            request = self._http.build_request("GET", url, headers=_REQUEST_HEADERS)
        except httpx.InvalidURL as e:
            raise RequestConstructionError(
                f"failed to create request: {e}", operation=operation
            ) from e

        try:
            response = self._http.send(request, stream=True)
        except httpx.UnsupportedProtocol as e:
            raise RequestConstructionError(
                f"failed to create request: {e}", operation=operation
            ) from e
        except httpx.RequestError as e:
            raise TransportError(f"failed to make request: {e}", operation=operation) from e

        try:
            if not response.is_success:
                raise HTTPStatusError(
                    response.status_code,
                    response.reason_phrase,
                    read_error_body(response),
                    operation=operation,
                )
            body = read_body(response, operation)
        finally:
            response.close()

        events = decode_events(body, operation)
        validate_events(events, operation)
        return EventsResponse(events=tuple(events))

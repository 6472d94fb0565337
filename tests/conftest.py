"""Shared fixtures: Gamma payload builders and a client wired to httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from gammafetch import GammaClient


def market_payload(market_id: str | None = "market-1", **extra: Any) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "question": "Will this happen?",
        "conditionId": "condition-1",
        "slug": "test-market",
        "active": True,
        "closed": False,
        "archived": False,
        "marketType": "binary",
        "outcomes": '["Yes", "No"]',
        "outcomePrices": '["0.5", "0.5"]',
        "volume": "10000",
        "liquidity": "5000",
        "volumeNum": 10000.0,
        "liquidityNum": 5000.0,
        "volume24hr": 250.0,
        "createdAt": "2025-01-01T00:00:00Z",
        "updatedAt": "2025-01-01T00:00:00Z",
        "tags": [{"id": "tag-market-1", "label": "Market Tag", "slug": "market-tag"}],
    }
    if market_id is not None:
        raw["id"] = market_id
    raw.update(extra)
    return raw


def event_payload(
    event_id: str | None = "1",
    markets: list[dict[str, Any]] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "slug": "test-event",
        "title": "Test Event",
        "subtitle": "Test Subtitle",
        "description": "Test Description",
        "category": "Sports",
        "subcategory": "Basketball",
        "startDate": "2025-01-01T00:00:00Z",
        "endDate": "2025-01-02T00:00:00Z",
        "active": True,
        "closed": False,
        "archived": False,
        "featured": False,
        "new": False,
        "volume": 12345.67,
        "liquidity": 5000.0,
        "volume24hr": 100.5,
        "commentCount": 42,
        "tags": [{"id": "tag-1", "label": "Test Tag", "slug": "test-tag", "forceShow": True}],
        "categories": [{"id": "cat-1", "label": "Sports", "slug": "sports"}],
        "markets": [market_payload()] if markets is None else markets,
    }
    if event_id is not None:
        raw["id"] = event_id
    raw.update(extra)
    return raw


@pytest.fixture
def events_json() -> Callable[[list[dict[str, Any]]], bytes]:
    def _encode(events: list[dict[str, Any]]) -> bytes:
        return json.dumps(events).encode()

    return _encode


@pytest.fixture
def make_client():
    """Build a GammaClient whose transport calls ``handler(request)``; records requests."""
    clients: list[GammaClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> GammaClient:
        requests: list[httpx.Request] = []

        def _recording(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = GammaClient(
            base_url=kwargs.pop("base_url", "https://gamma.test"),
            transport=httpx.MockTransport(_recording),
            **kwargs,
        )
        client.requests = requests  # type: ignore[attr-defined]
        clients.append(client)
        return client

    yield _make
    for c in clients:
        c.close()


@pytest.fixture
def make_event() -> Callable[..., dict[str, Any]]:
    return event_payload


@pytest.fixture
def make_market() -> Callable[..., dict[str, Any]]:
    return market_payload

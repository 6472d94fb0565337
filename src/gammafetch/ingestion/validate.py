"""Required-field checks for decoded records."""

from __future__ import annotations

from collections.abc import Sequence

from gammafetch.errors import ValidationError
from gammafetch.models import Event, Market


def missing_event_fields(event: Event) -> list[str]:
    """Names of required Event fields that are absent or empty."""
    return [] if event.id else ["id"]


def missing_market_fields(market: Market) -> list[str]:
    """Names of required Market fields that are absent or empty."""
    return [] if market.id else ["id"]


def validate_events(events: Sequence[Event], operation: str = "") -> None:
    """Check each event and then its markets, in order. Raise on the first failure."""
    for i, event in enumerate(events):
        missing = missing_event_fields(event)
        if missing:
            raise ValidationError(i, missing, operation=operation)
        for j, market in enumerate(event.markets):
            missing = missing_market_fields(market)
            if missing:
                raise ValidationError(i, missing, market_index=j, operation=operation)

"""Gamma record schema (Pydantic) - Event, Market and their metadata."""

from gammafetch.models.event import Event, EventsResponse
from gammafetch.models.market import Market, Outcome
from gammafetch.models.metadata import Category, EventCreator, ImageOptimization, Series, Tag

__all__ = [
    "Event",
    "EventsResponse",
    "Market",
    "Outcome",
    "Tag",
    "Category",
    "Series",
    "EventCreator",
    "ImageOptimization",
]

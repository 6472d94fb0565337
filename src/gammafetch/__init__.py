"""gammafetch - typed, validated client for the Polymarket Gamma events API."""

from gammafetch.errors import (
    BodyReadError,
    DecodeError,
    DecompressionError,
    GammaError,
    HTTPStatusError,
    RequestConstructionError,
    TransportError,
    ValidationError,
)
from gammafetch.ingestion import GammaClient
from gammafetch.models import (
    Category,
    Event,
    EventCreator,
    EventsResponse,
    ImageOptimization,
    Market,
    Outcome,
    Series,
    Tag,
)

__version__ = "0.1.0"

__all__ = [
    "GammaClient",
    "Event",
    "EventsResponse",
    "Market",
    "Outcome",
    "Tag",
    "Category",
    "Series",
    "EventCreator",
    "ImageOptimization",
    "GammaError",
    "RequestConstructionError",
    "TransportError",
    "HTTPStatusError",
    "DecompressionError",
    "BodyReadError",
    "DecodeError",
    "ValidationError",
]

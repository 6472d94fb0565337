"""Exceptions raised by the Gamma client. All are terminal; callers own retry policy."""

from __future__ import annotations


class GammaError(Exception):
    """Base Gamma client exception."""

    def __init__(self, message: str, *, operation: str = "") -> None:
        super().__init__(f"{operation}: {message}" if operation else message)
        self.operation = operation


class RequestConstructionError(GammaError):
    """Raised when the request URL or its parameters are malformed."""


class TransportError(GammaError):
    """Raised when the service could not be reached or did not answer in time."""


class HTTPStatusError(GammaError):
    """Raised on a non-2xx response."""

    def __init__(
        self,
        status_code: int,
        reason_phrase: str,
        body: str,
        *,
        operation: str = "",
    ) -> None:
        super().__init__(
            f"failed to fetch events: {status_code} {reason_phrase} - {body}",
            operation=operation,
        )
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.body = body


class DecompressionError(GammaError):
    """Raised when a compressed response body cannot be decompressed."""


class BodyReadError(GammaError):
    """Raised when reading the response body fails after a 2xx status."""


class DecodeError(GammaError):
    """Raised when the body is not a JSON array of events or a field has the wrong type."""


class ValidationError(GammaError):
    """Raised when an event or one of its markets lacks a required field."""

    def __init__(
        self,
        event_index: int,
        missing: list[str],
        *,
        market_index: int | None = None,
        operation: str = "",
    ) -> None:
        fields = ", ".join(repr(name) for name in missing)
        if market_index is None:
            where = f"event {event_index}"
        else:
            where = f"market {market_index} in event {event_index}"
        super().__init__(
            f"validation failed for {where}: missing required field(s) {fields}",
            operation=operation,
        )
        self.event_index = event_index
        self.market_index = market_index
        self.missing = missing


__all__ = [
    "GammaError",
    "RequestConstructionError",
    "TransportError",
    "HTTPStatusError",
    "DecompressionError",
    "BodyReadError",
    "DecodeError",
    "ValidationError",
]

"""Response body -> Event records."""

from __future__ import annotations

import httpx
import pydantic

from gammafetch.errors import BodyReadError, DecodeError, DecompressionError
from gammafetch.models import Event

_EVENT_LIST = pydantic.TypeAdapter(list[Event])


def read_body(response: httpx.Response, operation: str = "") -> bytes:
    """Read the full body, undoing any Content-Encoding (gzip) httpx recognises."""
    try:
        return response.read()
    except httpx.DecodingError as e:
        encoding = response.headers.get("Content-Encoding", "")
        raise DecompressionError(
            f"failed to decompress {encoding or 'encoded'} response: {e}", operation=operation
        ) from e
    except (httpx.HTTPError, httpx.StreamError) as e:
        raise BodyReadError(f"failed to read response body: {e}", operation=operation) from e


def read_error_body(response: httpx.Response) -> str:
    """Best-effort body of an error response; empty if it cannot be read."""
    try:
        return response.read().decode(response.encoding or "utf-8", errors="replace")
    except (httpx.HTTPError, httpx.StreamError):
        return ""


def decode_events(body: bytes, operation: str = "") -> list[Event]:
    """Parse a JSON array of events. Unknown fields are dropped; wrong types fail."""
    try:
        return _EVENT_LIST.validate_json(body, strict=True)
    except pydantic.ValidationError as e:
        raise DecodeError(
            f"failed to parse response: {e.error_count()} error(s); first: {_first_error(e)}",
            operation=operation,
        ) from e


def _first_error(exc: pydantic.ValidationError) -> str:
    err = exc.errors(include_url=False)[0]
    loc = ".".join(str(part) for part in err["loc"]) or "<root>"
    return f"{loc}: {err['msg']}"

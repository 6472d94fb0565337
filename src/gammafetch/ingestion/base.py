"""Protocol for the HTTP capability the client sends requests through."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

import httpx


class RequestSender(Protocol):
    """Builds and sends requests; ``httpx.Client`` satisfies this structurally.

    Implementations shared between threads must be safe for concurrent use.
    Pooling and connection reuse belong to the implementation, not the client.
    """

    def build_request(
        self,
        method: str,
        url: httpx.URL | str,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Request: ...

    def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response: ...

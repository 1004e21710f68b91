"""Global pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from starlette.requests import Request


def build_request(method: str = "GET", if_none_match: str | None = None) -> Request:
    """Build a bare Starlette request for calling the decider directly."""
    headers: list[tuple[bytes, bytes]] = []
    if if_none_match is not None:
        headers.append((b"if-none-match", if_none_match.encode("latin-1")))
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "server": ("testserver", 80),
        "path": "/",
        "root_path": "",
        "query_string": b"",
        "headers": headers,
    }
    return Request(scope)


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Factory for requests with an optional If-None-Match header."""
    return build_request

"""ETag middleware.

Runs every response through :func:`httpetag.conditional.etag_response`.

Usage:
    app.add_middleware(ETagMiddleware, options={"max_age": 60, "weak": False})
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from httpetag.conditional import etag_response
from httpetag.options import CachingOptionsInput, resolve_options


class ETagMiddleware(BaseHTTPMiddleware):
    """Add ETag/Cache-Control headers and answer conditional GETs with 304.

    Args:
        app: The ASGI application
        options: Caching options; read from settings (HTTPETAG_* env) if None

    Raises:
        pydantic.ValidationError: If options are malformed
    """

    def __init__(
        self,
        app: ASGIApp,
        options: CachingOptionsInput | Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(app)
        if options is None:
            from httpetag.config import settings

            options = settings.caching_options()
        self.options = resolve_options(options)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        return await etag_response(request, response, self.options)

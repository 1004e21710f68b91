"""Conditional GET handling.

Adds ETag and Cache-Control headers to eligible responses and substitutes
a 304 Not Modified when the request's If-None-Match still matches.

A response is eligible when the request is GET or HEAD, the status is 200,
and the content type is HTML or JSON. Ineligible responses are returned
untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from starlette.requests import Request
from starlette.responses import Response

from httpetag.body import duplicate, read_bytes
from httpetag.etag import create_etag
from httpetag.matching import is_match
from httpetag.options import CachingOptions, CachingOptionsInput, resolve_options

logger = logging.getLogger(__name__)

CONDITIONAL_METHODS = frozenset({"GET", "HEAD"})
TAGGED_CONTENT_TYPES = ("text/html", "application/json")


def is_eligible(request: Request, response: Response) -> bool:
    """Check whether an ETag should be computed for this response."""
    content_type = response.headers.get("content-type", "")
    return (
        request.method in CONDITIONAL_METHODS
        and response.status_code == 200
        and content_type.startswith(TAGGED_CONTENT_TYPES)
    )


async def etag_response(
    request: Request,
    response: Response,
    options: CachingOptions | CachingOptionsInput | Mapping[str, Any] | None = None,
) -> Response:
    """Handle ETag/If-None-Match for a single response.

    Args:
        request: Incoming request
        response: Response produced for it
        options: Partial caching options (see resolve_options)

    Returns:
        A new empty 304 response carrying the same headers if the client's
        validator matches, otherwise the original response with ETag and
        Cache-Control added.
    """
    resolved = resolve_options(options)

    if not is_eligible(request, response):
        return response

    headers = response.headers
    if "cache-control" not in headers and resolved.cache_control is not None:
        headers["Cache-Control"] = resolved.cache_control

    response, copy = await duplicate(response)
    body = await read_bytes(copy)

    etag = create_etag(body, weak=resolved.weak)
    headers["ETag"] = etag

    if_none_match = request.headers.get("if-none-match")
    if is_match(resolved.weak, if_none_match, etag):
        logger.debug(
            "ETag matched, returning 304",
            extra={"path": request.url.path, "etag": etag},
        )
        return Response(status_code=304, headers=headers)

    logger.debug("ETag set", extra={"path": request.url.path, "etag": etag})
    return response

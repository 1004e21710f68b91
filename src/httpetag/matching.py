"""If-None-Match comparison.

Weak comparison ignores the ``W/`` marker on both sides. Strong comparison
never matches a weak validator, even when the quoted payloads are identical.
"""

from __future__ import annotations

from starlette.datastructures import MutableHeaders
from starlette.requests import Request

from httpetag.etag import create_etag, is_weak, strip_weak


def is_match(weak: bool, if_none_match: str | None, etag: str) -> bool:
    """Compare a client validator against the current entity tag.

    Args:
        weak: Use weak comparison
        if_none_match: Raw If-None-Match value (None if the header was absent)
        etag: Entity tag computed for the current content

    Returns:
        True if the client's cached copy is still valid
    """
    if if_none_match is None:
        return False

    if weak:
        return strip_weak(if_none_match) == strip_weak(etag)

    return not is_weak(if_none_match) and not is_weak(etag) and if_none_match == etag


def check_match(
    request: Request,
    text: str,
    headers: MutableHeaders,
    weak: bool = True,
) -> bool:
    """Tag already-rendered content and test it against the request.

    Sets the ETag header on ``headers``. Handlers can call this with their
    serialized payload and return a 304 early when it yields True.
    """
    etag = create_etag(text, weak=weak)
    headers["ETag"] = etag
    return is_match(weak, request.headers.get("if-none-match"), etag)

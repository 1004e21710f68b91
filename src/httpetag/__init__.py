"""ETag and Cache-Control handling for Starlette/FastAPI responses.

- create_etag: hash response content into a quoted (optionally weak) entity tag
- is_match: compare If-None-Match against the current tag
- resolve_options: fill in caching defaults
- etag_response: tag a response or replace it with 304 Not Modified
- ETagMiddleware: apply etag_response to every response of an app
"""

from httpetag.conditional import etag_response, is_eligible
from httpetag.errors import EtagError, MissingEntityError, UnreadableBodyError
from httpetag.etag import EMPTY_ENTITY_TAG, create_etag, is_weak, strip_weak
from httpetag.matching import check_match, is_match
from httpetag.middleware import ETagMiddleware
from httpetag.options import CachingOptions, CachingOptionsInput, resolve_options

__all__ = [
    # Tags
    "EMPTY_ENTITY_TAG",
    "create_etag",
    "is_weak",
    "strip_weak",
    # Matching
    "check_match",
    "is_match",
    # Options
    "CachingOptions",
    "CachingOptionsInput",
    "resolve_options",
    # Responses
    "ETagMiddleware",
    "etag_response",
    "is_eligible",
    # Errors
    "EtagError",
    "MissingEntityError",
    "UnreadableBodyError",
]

"""Entity-tag generation.

Tags are the lowercase hex digest of the entity wrapped in double quotes,
optionally prefixed with the weak marker::

    "2c26b46b68ffc68ff99b453c1d30413413422d706483bfa0f98a5e886266e7ae"
    W/"2c26b46b68ffc68ff99b453c1d30413413422d706483bfa0f98a5e886266e7ae"
"""

from __future__ import annotations

import hashlib
from typing import Any, Callable

from httpetag.errors import MissingEntityError

WEAK_PREFIX = "W/"

# sha256(b"")
EMPTY_ENTITY_TAG = '"e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"'

DigestFactory = Callable[[bytes], Any]


def is_weak(tag: str) -> bool:
    """Return True if the tag carries the weak marker."""
    return tag.startswith(WEAK_PREFIX)


def strip_weak(tag: str) -> str:
    """Remove a leading weak marker, if any."""
    return tag[len(WEAK_PREFIX) :] if is_weak(tag) else tag


def _entity_tag(entity: bytes, digest: DigestFactory) -> str:
    if not entity and digest is hashlib.sha256:
        return EMPTY_ENTITY_TAG
    return f'"{digest(entity).hexdigest()}"'


def create_etag(
    entity: str | bytes | None,
    weak: bool = False,
    digest: DigestFactory = hashlib.sha256,
) -> str:
    """Create an entity tag for the given content.

    Args:
        entity: Response text (encoded as UTF-8) or raw bytes
        weak: Prefix the tag with the weak validator marker
        digest: hashlib-style constructor used to hash the entity

    Returns:
        Quoted entity tag, e.g. ``"ab12..."`` or ``W/"ab12..."``

    Raises:
        MissingEntityError: If entity is None
    """
    if entity is None:
        raise MissingEntityError()

    if isinstance(entity, str):
        entity = entity.encode("utf-8")

    tag = _entity_tag(entity, digest)
    return f"{WEAK_PREFIX}{tag}" if weak else tag

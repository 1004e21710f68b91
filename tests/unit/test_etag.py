"""Tests for entity-tag generation."""

from __future__ import annotations

import hashlib

import pytest

from httpetag.errors import EtagError, MissingEntityError
from httpetag.etag import EMPTY_ENTITY_TAG, create_etag, is_weak, strip_weak

DATA = "Hello World"


class TestCreateEtag:
    """Tests for create_etag."""

    def test_strong_tag_is_quoted_hex_digest(self) -> None:
        """Strong tag is the quoted lowercase SHA-256 hex digest."""
        expected = hashlib.sha256(DATA.encode("utf-8")).hexdigest()
        assert create_etag(DATA) == f'"{expected}"'

    def test_strong_tag_has_no_weak_prefix(self) -> None:
        """Strong tags never begin with W/."""
        assert not create_etag(DATA).startswith("W/")

    def test_weak_tag_has_weak_prefix(self) -> None:
        """Weak tags always begin with W/."""
        assert create_etag(DATA, weak=True).startswith("W/")

    def test_weak_and_strong_differ_only_by_prefix(self) -> None:
        """Weak tag is the strong tag with W/ in front."""
        assert create_etag(DATA, weak=True) == "W/" + create_etag(DATA)

    def test_deterministic(self) -> None:
        """Repeated calls give the same tag."""
        assert create_etag(DATA) == create_etag(DATA)
        assert create_etag(DATA, weak=True) == create_etag(DATA, weak=True)

    def test_different_content_gives_different_tag(self) -> None:
        """Changed content changes the tag."""
        assert create_etag("Hello World") != create_etag("Hello World!")

    def test_bytes_and_text_agree(self) -> None:
        """Text is hashed as its UTF-8 encoding."""
        text = "Grüße, 世界"
        assert create_etag(text) == create_etag(text.encode("utf-8"))

    def test_empty_entity_uses_precomputed_tag(self) -> None:
        """Empty content returns the digest of the empty byte sequence."""
        assert create_etag("") == EMPTY_ENTITY_TAG
        assert EMPTY_ENTITY_TAG == f'"{hashlib.sha256(b"").hexdigest()}"'

    def test_empty_entity_weak(self) -> None:
        """Empty content honours the weak flag."""
        assert create_etag("", weak=True) == "W/" + EMPTY_ENTITY_TAG
        assert create_etag(b"", weak=True) == "W/" + EMPTY_ENTITY_TAG

    def test_custom_digest(self) -> None:
        """An injected digest constructor is used for hashing."""
        expected = hashlib.sha1(DATA.encode("utf-8")).hexdigest()
        assert create_etag(DATA, digest=hashlib.sha1) == f'"{expected}"'

    def test_custom_digest_empty_entity(self) -> None:
        """Empty content is hashed with a non-default digest."""
        expected = hashlib.md5(b"").hexdigest()
        assert create_etag("", digest=hashlib.md5) == f'"{expected}"'

    def test_none_entity_raises(self) -> None:
        """Missing entity raises an invalid-argument error."""
        with pytest.raises(MissingEntityError, match="argument entity is required"):
            create_etag(None)

    def test_missing_entity_error_is_type_error(self) -> None:
        """MissingEntityError can be caught as TypeError or EtagError."""
        with pytest.raises(TypeError):
            create_etag(None)
        with pytest.raises(EtagError):
            create_etag(None, weak=True)


class TestWeakHelpers:
    """Tests for is_weak and strip_weak."""

    def test_is_weak(self) -> None:
        assert is_weak('W/"abc"')
        assert not is_weak('"abc"')
        assert not is_weak("")

    def test_strip_weak(self) -> None:
        assert strip_weak('W/"abc"') == '"abc"'
        assert strip_weak('"abc"') == '"abc"'

    def test_strip_weak_only_removes_leading_marker(self) -> None:
        """Only one leading marker is removed."""
        assert strip_weak('W/W/"abc"') == 'W/"abc"'
        assert strip_weak('"W/abc"') == '"W/abc"'

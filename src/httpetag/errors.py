"""Exceptions raised by httpetag."""

from __future__ import annotations


class EtagError(Exception):
    """Base exception for entity-tag handling."""


class MissingEntityError(EtagError, TypeError):
    """No entity was supplied to hash."""

    def __init__(self) -> None:
        super().__init__("argument entity is required")


class UnreadableBodyError(EtagError):
    """Response exposes neither an in-memory body nor a body iterator."""

    def __init__(self, response: object) -> None:
        super().__init__(f"cannot duplicate body of {type(response).__name__}")

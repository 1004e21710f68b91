"""Response body duplication.

A streaming body can only be iterated once. :func:`duplicate` buffers it and
hands the original response a replay of the same chunks, so both the
returned copy and the original can be consumed.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence

from starlette.responses import Response

from httpetag.errors import UnreadableBodyError

Chunk = str | bytes | memoryview


async def _replay(chunks: Sequence[Chunk]) -> AsyncIterator[Chunk]:
    for chunk in chunks:
        yield chunk


def _to_bytes(chunk: Chunk, charset: str) -> bytes:
    # str chunks go out encoded with the response's own charset
    if isinstance(chunk, str):
        return chunk.encode(charset)
    return bytes(chunk)


def content_charset(response: Response) -> str:
    """Return the charset declared in Content-Type, defaulting to utf-8."""
    content_type = response.headers.get("content-type", "")
    for param in content_type.split(";")[1:]:
        name, _, value = param.partition("=")
        if name.strip().lower() == "charset" and value.strip():
            return value.strip().strip('"')
    return "utf-8"


async def duplicate(response: Response) -> tuple[Response, Response]:
    """Split a response into two independently readable views.

    Returns:
        ``(response, copy)``: the original object, still readable, and a new
        in-memory Response holding the same status, headers and body.

    Raises:
        UnreadableBodyError: If the body cannot be materialized
    """
    body_iterator = getattr(response, "body_iterator", None)
    if body_iterator is not None:
        chunks = [chunk async for chunk in body_iterator]
        response.body_iterator = _replay(chunks)
        body = b"".join(_to_bytes(chunk, response.charset) for chunk in chunks)
    elif isinstance(getattr(response, "body", None), (bytes, memoryview)):
        body = bytes(response.body)
    else:
        raise UnreadableBodyError(response)

    copy = Response(content=body, status_code=response.status_code, headers=response.headers)
    return response, copy


async def read_bytes(response: Response) -> bytes:
    """Read a response's whole body as bytes.

    Consumes the body of ``response``; call on a duplicate.
    """
    body_iterator = getattr(response, "body_iterator", None)
    if body_iterator is not None:
        return b"".join([_to_bytes(chunk, response.charset) async for chunk in body_iterator])
    return bytes(response.body)


async def read_text(response: Response) -> str:
    """Read a response's whole body as text in its declared charset."""
    body = await read_bytes(response)
    return body.decode(content_charset(response), errors="replace")

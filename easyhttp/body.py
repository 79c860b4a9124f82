"""
Body-handling strategies.

A ``BodyStrategy`` decides which representation a response body is
materialized into once the exchange completes. The representation is a
closed set tagged by ``BodyKind``; the tag travels with the response so
decoding dispatches on it instead of inspecting the body value.
"""

import io
import os
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath
from typing import Any, Optional, Union, cast

import httpx


class BodyKind(Enum):
    """Representations a response body can be materialized into."""

    TEXT = "text"  # str
    FILE = "file"  # pathlib.Path of a file holding the body
    STREAM = "stream"  # readable binary stream, left open
    BYTES = "bytes"  # bytes
    LINES = "lines"  # lazy iterator of str lines
    DISCARD = "discard"  # no body

    @classmethod
    def classify(cls, value: Any) -> Optional["BodyKind"]:
        """
        Classify an already materialized body value.

        Checks text, path, stream, bytes and lines in that order and returns
        ``None`` when the value matches none of them.
        """
        if value is None:
            return cls.DISCARD
        if isinstance(value, str):
            return cls.TEXT
        if isinstance(value, PurePath):
            return cls.FILE
        if isinstance(value, io.IOBase):
            return cls.STREAM
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.BYTES
        if isinstance(value, (Iterator, list, tuple)):
            return cls.LINES
        return None


@dataclass(frozen=True)
class BodyStrategy:
    """
    How the body of a response is materialized.

    Use the ``of_*`` constructors rather than building instances directly.

    Attributes:
        kind: Representation the body is materialized into
        path: Target file for ``BodyKind.FILE``
        encoding: Text encoding override for ``TEXT`` and ``LINES``
    """

    kind: BodyKind
    path: Optional[Path] = None
    encoding: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is BodyKind.FILE and self.path is None:
            raise ValueError("A file body strategy requires a path")

    @classmethod
    def of_text(cls, encoding: Optional[str] = None) -> "BodyStrategy":
        return cls(BodyKind.TEXT, encoding=encoding)

    @classmethod
    def of_bytes(cls) -> "BodyStrategy":
        return cls(BodyKind.BYTES)

    @classmethod
    def of_stream(cls) -> "BodyStrategy":
        return cls(BodyKind.STREAM)

    @classmethod
    def of_lines(cls, encoding: Optional[str] = None) -> "BodyStrategy":
        return cls(BodyKind.LINES, encoding=encoding)

    @classmethod
    def of_file(cls, path: Union[str, "os.PathLike[str]"]) -> "BodyStrategy":
        if path is None:
            raise TypeError("path must not be None")
        return cls(BodyKind.FILE, path=Path(path))

    @classmethod
    def discarding(cls) -> "BodyStrategy":
        return cls(BodyKind.DISCARD)


def _apply_encoding(response: httpx.Response, strategy: BodyStrategy) -> None:
    if strategy.encoding is not None:
        response.encoding = strategy.encoding


def _from_content(response: httpx.Response, strategy: BodyStrategy) -> Any:
    """Build the body value once ``response`` has been fully read."""
    kind = strategy.kind
    if kind is BodyKind.TEXT:
        _apply_encoding(response, strategy)
        return response.text
    if kind is BodyKind.BYTES:
        return response.content
    if kind is BodyKind.STREAM:
        return io.BytesIO(response.content)
    if kind is BodyKind.LINES:
        _apply_encoding(response, strategy)
        return iter(response.iter_lines())
    return None


def materialize(response: httpx.Response, strategy: BodyStrategy) -> Any:
    """
    Materialize the body of a streamed response according to ``strategy``.

    Args:
        response: Response returned by ``httpx.Client.send(..., stream=True)``
        strategy: Body-handling strategy of the exchange

    Returns:
        The body value in the representation dictated by the strategy
    """
    if strategy.kind is BodyKind.FILE:
        path = cast(Path, strategy.path)
        with open(path, "wb") as target:
            for chunk in response.iter_bytes():
                target.write(chunk)
        return path

    response.read()
    return _from_content(response, strategy)


async def amaterialize(response: httpx.Response, strategy: BodyStrategy) -> Any:
    """Async counterpart of :func:`materialize`."""
    if strategy.kind is BodyKind.FILE:
        path = cast(Path, strategy.path)
        with open(path, "wb") as target:
            async for chunk in response.aiter_bytes():
                target.write(chunk)
        return path

    await response.aread()
    return _from_content(response, strategy)

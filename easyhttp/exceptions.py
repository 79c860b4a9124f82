"""
Exception hierarchy for the easyhttp library.

Every fault the library can produce is an ``EasyHttpError``. Transport and
decode faults are never raised out of the public operations; they are
returned inside a ``Failure`` so callers can recover from them. The only
exceptions that do escape are ``TypeError`` contract violations raised for
``None`` arguments before any I/O happens.

**Exception Hierarchy Design:**

```
EasyHttpError (base exception)
├── TransportError (exchange could not be completed)
│   └── TransportConnectionError (network / I/O failures)
│       └── TransportTimeoutError (client-side timeouts)
├── DecodeError (response body could not be turned into a value)
│   ├── NullBodyError (there is no body to decode)
│   └── UnsupportedBodyError (body representation is not one of the five)
└── MappingError (object mapper failures)
    ├── SerializationError
    └── DeserializationError
```

**Exception Flow:**

```
httpx.ConnectError     → TransportConnectionError → Failure from send()
httpx.TimeoutException → TransportTimeoutError    → Failure from send()
OSError                → TransportConnectionError → Failure from send()
pydantic error         → DeserializationError     → DecodeError from decode()
```
"""

from typing import Any, Optional

import httpx


class EasyHttpError(Exception):
    """
    Base exception for all library errors.

    Attributes:
        message: Human-readable error description
        response: HTTP response object (if available)
        request: HTTP request object (if available)
    """

    def __init__(
        self,
        message: str = "",
        response: Optional[Any] = None,
        request: Optional[Any] = None,
    ):
        self.message = message
        self.response = response
        self.request = request
        super().__init__(message)


class TransportError(EasyHttpError):
    """
    The exchange with the remote server could not be completed.

    The original fault raised by the transport is kept in ``cause`` and is
    also chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str = "",
        cause: Optional[BaseException] = None,
        request: Optional[Any] = None,
    ):
        super().__init__(message, request=request)
        self.cause = cause
        self.__cause__ = cause


class TransportConnectionError(TransportError):
    """
    A network or I/O failure interrupted the exchange.

    Covers refused connections, DNS failures, dropped connections, protocol
    errors and any ``OSError`` raised while reading the body.
    """

    pass


class TransportTimeoutError(TransportConnectionError):
    """A client-side timeout occurred during the exchange."""

    pass


class DecodeError(EasyHttpError):
    """
    The response body could not be decoded into the requested type.

    Attributes:
        body: The materialized body value that was being decoded
        cause: The underlying fault, if any
    """

    def __init__(
        self,
        message: str = "",
        body: Optional[Any] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.body = body
        self.cause = cause
        self.__cause__ = cause


class NullBodyError(DecodeError):
    """The response carries no body (the strategy discarded it)."""

    pass


class UnsupportedBodyError(DecodeError):
    """
    The body value is not one of the supported representations.

    Supported representations are ``str``, ``pathlib.Path``, a readable
    binary stream, ``bytes`` and an iterator of text lines.
    """

    pass


class MappingError(EasyHttpError):
    """Base for object mapper failures."""

    def __init__(self, message: str = "", cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
        self.__cause__ = cause


class SerializationError(MappingError):
    """A value could not be serialized to JSON."""

    pass


class DeserializationError(MappingError):
    """A payload could not be deserialized into the target type."""

    pass


def map_transport_exception(
    exc: BaseException, request: Optional[httpx.Request] = None
) -> TransportError:
    """
    Map a fault raised by the transport onto our exception hierarchy.

    Args:
        exc: The original exception
        request: The request that was being sent

    Returns:
        Mapped exception from our hierarchy
    """
    if isinstance(exc, TransportError):
        return exc

    if isinstance(exc, httpx.TimeoutException):
        return TransportTimeoutError(
            f"Request timed out: {exc}", cause=exc, request=request
        )

    if isinstance(exc, (httpx.NetworkError, httpx.ProtocolError, OSError)):
        return TransportConnectionError(
            f"Network error: {exc}", cause=exc, request=request
        )

    return TransportError(f"HTTP client error: {exc}", cause=exc, request=request)

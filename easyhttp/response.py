"""
Response types.

``HttpResponse`` is the transport-level view of a completed exchange: status,
headers, URL, protocol version and the body already materialized by the
exchange's ``BodyStrategy``. ``EasyHttpResponse`` wraps it together with the
original request, the strategy and the client that produced it, and adds
status classification, conditional actions, body decoding and replay.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

import httpx

from .body import BodyKind, BodyStrategy
from .exceptions import DecodeError, NullBodyError, UnsupportedBodyError
from .logging_config import get_logger
from .result import Failure, Result, Success

if TYPE_CHECKING:
    from .client import EasyHttpClient

logger = get_logger(__name__)

# marks a body_kind left for __post_init__ to classify
_CLASSIFY: Any = object()


@dataclass(frozen=True)
class HttpResponse:
    """
    A completed exchange with its body already materialized.

    Attributes:
        status_code: HTTP status code
        headers: Response headers
        url: URL the response was received from
        http_version: Protocol version, e.g. "HTTP/1.1"
        body: Body value in the representation tagged by ``body_kind``
        body_kind: Representation of ``body``; None when it is not supported.
            Classified from ``body`` when not given
        request: Request that produced this response (after redirects)
        previous: Previous response in the redirect chain, if any
        raw: Underlying httpx response, if any
    """

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    url: httpx.URL = field(default_factory=httpx.URL)
    http_version: str = "HTTP/1.1"
    body: Any = None
    body_kind: Optional[BodyKind] = _CLASSIFY
    request: Optional[httpx.Request] = None
    previous: Optional["HttpResponse"] = None
    raw: Optional[httpx.Response] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.body_kind is _CLASSIFY:
            object.__setattr__(self, "body_kind", BodyKind.classify(self.body))

    @classmethod
    def of(
        cls,
        status_code: int,
        body: Any = None,
        headers: Optional[dict[str, str]] = None,
        url: str = "",
        request: Optional[httpx.Request] = None,
        previous: Optional["HttpResponse"] = None,
    ) -> "HttpResponse":
        """Build a response from a body value, classifying its representation."""
        return cls(
            status_code=status_code,
            headers=httpx.Headers(headers),
            url=httpx.URL(url),
            body=body,
            request=request,
            previous=previous,
        )

    @classmethod
    def from_httpx(
        cls, response: httpx.Response, body: Any, kind: BodyKind
    ) -> "HttpResponse":
        """Build a response from an httpx response and its materialized body."""
        previous = None
        for hop in response.history:
            previous = cls(
                status_code=hop.status_code,
                headers=hop.headers,
                url=hop.url,
                http_version=hop.http_version,
                request=hop.request,
                previous=previous,
                raw=hop,
            )

        return cls(
            status_code=response.status_code,
            headers=response.headers,
            url=response.url,
            http_version=response.http_version,
            body=body,
            body_kind=kind,
            request=response.request,
            previous=previous,
            raw=response,
        )


@dataclass(frozen=True)
class EasyHttpResponse:
    """
    Immutable envelope around a completed exchange.

    Retrying never modifies an envelope; it produces a new one.

    Attributes:
        response: The completed exchange
        body_strategy: Strategy used to materialize the body
        original_request: Request exactly as it was handed to the client
        client: Client that produced this response; used for decoding and replay
    """

    response: HttpResponse
    body_strategy: BodyStrategy
    original_request: httpx.Request
    client: "EasyHttpClient" = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        for name in ("response", "body_strategy", "original_request", "client"):
            if getattr(self, name) is None:
                raise TypeError(f"{name} must not be None")

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers

    @property
    def url(self) -> httpx.URL:
        return self.response.url

    @property
    def http_version(self) -> str:
        return self.response.http_version

    @property
    def body(self) -> Any:
        return self.response.body

    @property
    def request(self) -> Optional[httpx.Request]:
        """The request that produced the final response, after redirects."""
        return self.response.request

    @property
    def previous_response(self) -> Optional[HttpResponse]:
        return self.response.previous

    def to_httpx(self) -> Optional[httpx.Response]:
        """Return the underlying httpx response, if there is one."""
        return self.response.raw

    # Status classification

    def is_1xx(self) -> bool:
        return 100 <= self.status_code <= 199

    def is_2xx(self) -> bool:
        return 200 <= self.status_code <= 299

    def is_ok(self) -> bool:
        return self.status_code == 200

    def is_3xx(self) -> bool:
        return 300 <= self.status_code <= 399

    def is_4xx(self) -> bool:
        return 400 <= self.status_code <= 499

    def is_5xx(self) -> bool:
        return 500 <= self.status_code <= 599

    # Conditional actions

    def on_ok(self, action: Callable[[], Any]) -> "EasyHttpResponse":
        """Run ``action`` if the status code is 200; return this response."""
        return self._run(action, self.is_ok())

    def on_2xx(self, action: Callable[[], Any]) -> "EasyHttpResponse":
        """Run ``action`` if the status code is 2xx; return this response."""
        return self._run(action, self.is_2xx())

    def on_ko(self, action: Callable[[], Any]) -> "EasyHttpResponse":
        """Run ``action`` if the status code is not 2xx; return this response."""
        return self._run(action, not self.is_2xx())

    def _run(self, action: Callable[[], Any], should_run: bool) -> "EasyHttpResponse":
        if action is None:
            raise TypeError("action must not be None")
        if should_run:
            action()
        return self

    # Body decoding

    def decode(self, target: Any) -> "Result[Any]":
        """
        Decode the response body into an instance of ``target``.

        The body is read according to its representation: text is decoded
        directly, a file path is opened and read, a stream is read to the end
        (and left open), bytes are decoded directly and lines are joined
        without a separator.

        Args:
            target: Any type the client's mapper can build, e.g. a pydantic
                model, a dataclass or ``list[int]``

        Returns:
            ``Success`` with the decoded value, or ``Failure`` with a
            ``DecodeError`` carrying the body and the cause
        """
        if target is None:
            raise TypeError("target must not be None")

        try:
            return Success(self._read_body(target))
        except DecodeError as e:
            logger.debug("decode_failed", target=repr(target), error=e.message)
            return Failure(e)
        except Exception as e:
            logger.debug("decode_failed", target=repr(target), error=str(e))
            return Failure(
                DecodeError(
                    "An error occurred while trying to read response body",
                    body=self.body,
                    cause=e,
                )
            )

    def decode_for_status(self, status_code: int, target: Any) -> "Result[Any]":
        """
        Decode the body only if the response has the given status code.

        Returns:
            ``Success(None)`` without reading the body when the status code
            differs, otherwise the outcome of :meth:`decode`
        """
        if status_code != self.status_code:
            return Success(None)
        return self.decode(target)

    def _read_body(self, target: Any) -> Any:
        body = self.body
        if body is None:
            raise NullBodyError("The response body is null", body=None)

        mapper = self.client.mapper
        kind = self.response.body_kind

        if kind is BodyKind.TEXT:
            return mapper.deserialize(body, target)
        if kind is BodyKind.FILE:
            with open(body, "rb") as source:
                return mapper.deserialize(source.read(), target)
        if kind is BodyKind.STREAM:
            return mapper.deserialize(body.read(), target)
        if kind is BodyKind.BYTES:
            return mapper.deserialize(bytes(body), target)
        if kind is BodyKind.LINES:
            return mapper.deserialize("".join(body), target)

        raise UnsupportedBodyError(
            f"Unknown body type {type(body).__name__}, unable to read it", body=body
        )

    # Replay

    def retry(self) -> "Result[EasyHttpResponse]":
        """Replay the original request synchronously with the same strategy."""
        logger.debug(
            "retry",
            method=self.original_request.method,
            url=str(self.original_request.url),
        )
        return self.client.send_envelope(self.original_request, self.body_strategy)

    async def retry_async(self) -> "Result[EasyHttpResponse]":
        """Replay the original request asynchronously with the same strategy."""
        logger.debug(
            "retry_async",
            method=self.original_request.method,
            url=str(self.original_request.url),
        )
        return await self.client.send_envelope_async(
            self.original_request, self.body_strategy
        )

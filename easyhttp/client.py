"""
EasyHttpClient implementation.

This module contains the client facade that sends requests through a
``Transport`` and reports every outcome as a ``Result`` instead of raising,
plus factory helpers for building clients with default collaborators.
"""

from collections.abc import AsyncGenerator, Generator
from contextlib import asynccontextmanager, contextmanager
from typing import Any, Optional

import httpx

from .body import BodyStrategy
from .config import ClientConfig, LoggingConfig
from .exceptions import map_transport_exception
from .logging_config import get_component_logger
from .mapper import Deserializer, ObjectMapper
from .response import EasyHttpResponse, HttpResponse
from .result import Failure, Result, Success
from .transport import Transport


def _require(value: Any, name: str) -> None:
    if value is None:
        raise TypeError(f"{name} must not be None")


class EasyHttpClient:
    """
    Client facade returning recoverable results.

    Features:
    - ``send``/``send_async`` return the completed exchange as a ``Result``
    - ``send_envelope``/``send_envelope_async`` wrap it in an
      ``EasyHttpResponse`` able to decode, classify and replay itself
    - transport faults are mapped onto ``TransportError`` and returned as
      ``Failure``; only ``None`` arguments raise
    - immutable: ``with_transport``/``with_mapper`` return new instances

    A single instance is meant to be shared by many callers; it holds no
    per-exchange state.

    Events are emitted through the logger named by ``logging_config``, whose
    level gates them.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        mapper: Optional[Deserializer] = None,
        logging_config: Optional[LoggingConfig] = None,
    ):
        self._transport = transport if transport is not None else Transport()
        self._mapper = mapper if mapper is not None else ObjectMapper()
        self._logging_config = logging_config or LoggingConfig()

        # Setup logging
        self.logger = get_component_logger(self._logging_config)

    def __repr__(self) -> str:
        return f"EasyHttpClient(transport={self._transport!r}, mapper={self._mapper!r})"

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def mapper(self) -> Deserializer:
        return self._mapper

    @property
    def logging_config(self) -> LoggingConfig:
        return self._logging_config

    def with_transport(self, transport: Transport) -> "EasyHttpClient":
        """
        Return a client using ``transport``.

        Returns:
            This client if ``transport`` is the one it already holds,
            otherwise a new client sharing this client's mapper
        """
        _require(transport, "transport")
        if transport is self._transport:
            return self
        return EasyHttpClient(
            transport=transport,
            mapper=self._mapper,
            logging_config=self._logging_config,
        )

    def with_mapper(self, mapper: Deserializer) -> "EasyHttpClient":
        """
        Return a client using ``mapper``.

        Returns:
            This client if ``mapper`` is the one it already holds,
            otherwise a new client sharing this client's transport
        """
        _require(mapper, "mapper")
        if mapper is self._mapper:
            return self
        return EasyHttpClient(
            transport=self._transport,
            mapper=mapper,
            logging_config=self._logging_config,
        )

    with_deserializer = with_mapper

    def _fault(self, exc: Exception, request: httpx.Request) -> Failure:
        error = map_transport_exception(exc, request)
        self.logger.warning(
            "transport_fault",
            method=request.method,
            url=str(request.url),
            error_type=type(error).__name__,
            error=str(exc),
        )
        return Failure(error)

    def _wrap(
        self, request: httpx.Request, response: HttpResponse, strategy: BodyStrategy
    ) -> EasyHttpResponse:
        self.logger.debug("envelope_created", status_code=response.status_code)
        return EasyHttpResponse(
            response=response,
            body_strategy=strategy,
            original_request=request,
            client=self,
        )

    def send(
        self, request: httpx.Request, strategy: BodyStrategy
    ) -> "Result[HttpResponse]":
        """
        Send a request and block until the exchange completes.

        Args:
            request: Request to send
            strategy: Representation the response body is materialized into

        Returns:
            ``Success`` with the response, or ``Failure`` with a
            ``TransportError``

        Raises:
            TypeError: If ``request`` or ``strategy`` is None
        """
        _require(request, "request")
        _require(strategy, "strategy")

        try:
            return Success(self._transport.execute(request, strategy))
        except Exception as e:
            return self._fault(e, request)

    async def send_async(
        self, request: httpx.Request, strategy: BodyStrategy
    ) -> "Result[HttpResponse]":
        """Asynchronous counterpart of :meth:`send`."""
        _require(request, "request")
        _require(strategy, "strategy")

        try:
            return Success(await self._transport.execute_async(request, strategy))
        except Exception as e:
            return self._fault(e, request)

    def send_envelope(
        self, request: httpx.Request, strategy: BodyStrategy
    ) -> "Result[EasyHttpResponse]":
        """
        Send a request and wrap the response in an ``EasyHttpResponse``.

        The envelope is bound to this client, ``request`` and ``strategy`` so
        it can be decoded and replayed later.
        """
        return self.send(request, strategy).map(
            lambda response: self._wrap(request, response, strategy)
        )

    async def send_envelope_async(
        self, request: httpx.Request, strategy: BodyStrategy
    ) -> "Result[EasyHttpResponse]":
        """Asynchronous counterpart of :meth:`send_envelope`."""
        result = await self.send_async(request, strategy)
        return result.map(lambda response: self._wrap(request, response, strategy))

    def create_body(self, value: Any) -> Optional[str]:
        """
        Serialize ``value`` into JSON text for use as request content.

        Best effort: when the value is None, cannot be serialized by the
        mapper or serialization fails, a warning is logged and None (no body)
        is returned.
        """
        value_type = type(value).__name__
        if value is None or not self._mapper.can_serialize(type(value)):
            self.logger.warning(
                "body_serialization_fallback",
                reason="value is None or not serializable",
                value_type=value_type,
            )
            return None

        try:
            return self._mapper.serialize(value)
        except Exception as e:
            self.logger.warning(
                "body_serialization_fallback",
                reason=str(e),
                value_type=value_type,
            )
            return None


def new_client(
    mapper: Optional[Deserializer] = None,
    transport: Optional[Transport] = None,
    config: Optional[ClientConfig] = None,
) -> EasyHttpClient:
    """
    Build a client, creating default collaborators for those not given.

    Args:
        mapper: Mapper used to decode bodies; defaults to ``ObjectMapper``
        transport: Transport used to send requests; defaults to one built
            from ``config``
        config: Configuration of the default transport and of the client's
            logger

    Raises:
        ValueError: If both ``transport`` and ``config`` are given; a given
            transport already carries its own configuration
    """
    if transport is not None and config is not None:
        raise ValueError("config cannot be combined with an explicit transport")

    if transport is None:
        transport = Transport(config=config)
    logging_config = config.logging if config is not None else None
    return EasyHttpClient(
        transport=transport, mapper=mapper, logging_config=logging_config
    )


@contextmanager
def create_client(
    config: Optional[ClientConfig] = None,
) -> Generator[EasyHttpClient, None, None]:
    """
    Context manager for creating a client and closing its transport.

    Only the blocking httpx client can be closed here. An async client
    created inside the block by ``send_async`` is left open and a warning is
    logged; use :func:`acreate_client` for asynchronous exchanges.

    Yields:
        Configured EasyHttpClient instance
    """
    client = new_client(config=config)
    try:
        yield client
    finally:
        client.transport.close()
        if client.transport.async_client_open:
            client.logger.warning(
                "async_client_left_open",
                hint="use acreate_client for asynchronous exchanges",
            )


@asynccontextmanager
async def acreate_client(
    config: Optional[ClientConfig] = None,
) -> AsyncGenerator[EasyHttpClient, None]:
    """Async counterpart of :func:`create_client`; closes both httpx clients."""
    client = new_client(config=config)
    try:
        yield client
    finally:
        await client.transport.aclose()

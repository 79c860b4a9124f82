"""
Transport built on httpx.

The transport performs exchanges and materializes response bodies. It holds a
blocking ``httpx.Client`` for synchronous exchanges and an
``httpx.AsyncClient`` for asynchronous ones; both are created lazily from a
``ClientConfig`` unless supplied. Connection pooling, TLS, timeouts and
redirect following are left to httpx.
"""

import threading
from typing import Any, Optional

import httpx

from .body import BodyStrategy, amaterialize, materialize
from .config import ClientConfig
from .logging_config import get_component_logger
from .response import HttpResponse


class Transport:
    """
    Sends requests through httpx and materializes their bodies.

    Safe to share between threads and tasks: it holds no per-exchange state.
    Faults raised by httpx propagate to the caller unchanged.
    """

    def __init__(
        self,
        sync_client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
        config: Optional[ClientConfig] = None,
    ):
        self.config = config or ClientConfig()
        self._sync_client = sync_client
        self._async_client = async_client
        self._lock = threading.Lock()

        # Setup logging
        self.logger = get_component_logger(self.config.logging)

    def __repr__(self) -> str:
        return f"Transport(base_url={self.config.base_url!r})"

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    @property
    def sync_client(self) -> httpx.Client:
        """The blocking httpx client, created on first use."""
        if self._sync_client is None:
            with self._lock:
                if self._sync_client is None:
                    self._sync_client = httpx.Client(**self.config.to_httpx_kwargs())
                    self.logger.debug(
                        "sync_client_created", base_url=self.config.base_url
                    )
        return self._sync_client

    @property
    def async_client(self) -> httpx.AsyncClient:
        """The asynchronous httpx client, created on first use."""
        if self._async_client is None:
            with self._lock:
                if self._async_client is None:
                    self._async_client = httpx.AsyncClient(
                        **self.config.to_httpx_kwargs()
                    )
                    self.logger.debug(
                        "async_client_created", base_url=self.config.base_url
                    )
        return self._async_client

    def execute(self, request: httpx.Request, strategy: BodyStrategy) -> HttpResponse:
        """
        Send ``request`` and block until its body is materialized.

        Args:
            request: Request to send
            strategy: Representation the body is materialized into

        Returns:
            The completed exchange
        """
        response = self.sync_client.send(request, stream=True)
        try:
            body = materialize(response, strategy)
        finally:
            response.close()
        return HttpResponse.from_httpx(response, body, strategy.kind)

    async def execute_async(
        self, request: httpx.Request, strategy: BodyStrategy
    ) -> HttpResponse:
        """Asynchronous counterpart of :meth:`execute`."""
        response = await self.async_client.send(request, stream=True)
        try:
            body = await amaterialize(response, strategy)
        finally:
            await response.aclose()
        return HttpResponse.from_httpx(response, body, strategy.kind)

    @property
    def async_client_open(self) -> bool:
        """Whether an async client exists and has not been closed."""
        return self._async_client is not None and not self._async_client.is_closed

    def close(self) -> None:
        """Close the blocking client, if it was created."""
        if self._sync_client is not None and not self._sync_client.is_closed:
            self._sync_client.close()

    async def aclose(self) -> None:
        """Close both clients, if they were created."""
        self.close()
        if self._async_client is not None and not self._async_client.is_closed:
            await self._async_client.aclose()

#!/usr/bin/env python3
"""
Demonstration of the easyhttp library.

Runs against an in-process httpx mock server, so no network is needed:

    python examples/envelope_demo.py
"""

import asyncio
import itertools
from datetime import datetime

import httpx
from pydantic import BaseModel

from easyhttp import BodyStrategy, EasyHttpClient, Transport, setup_logging


class Message(BaseModel):
    message_id: int
    created_at: datetime


_attempts = itertools.count(1)


def demo_server(request: httpx.Request) -> httpx.Response:
    """Serve messages, failing the first call to /flaky with a 503."""
    if request.url.path == "/down":
        raise httpx.ConnectError("All connection attempts failed", request=request)
    if request.url.path == "/flaky" and next(_attempts) == 1:
        return httpx.Response(503, text="try again")
    return httpx.Response(
        200, json={"message_id": 42, "created_at": "2024-05-01T10:30:00Z"}
    )


def build_client() -> EasyHttpClient:
    mock = httpx.MockTransport(demo_server)
    transport = Transport(
        sync_client=httpx.Client(transport=mock, base_url="http://demo"),
        async_client=httpx.AsyncClient(transport=mock, base_url="http://demo"),
    )
    return EasyHttpClient(transport=transport)


def demo_decode(client: EasyHttpClient) -> None:
    """Decode the same body from several representations."""
    print("\n=== Decoding ===")
    request = httpx.Request("GET", "http://demo/msg")

    for strategy in (
        BodyStrategy.of_text(),
        BodyStrategy.of_bytes(),
        BodyStrategy.of_stream(),
        BodyStrategy.of_lines(),
    ):
        result = client.send_envelope(request, strategy).flat_map(
            lambda envelope: envelope.decode(Message)
        )
        print(f"{strategy.kind.value:>6}: {result.get()}")


def demo_retry(client: EasyHttpClient) -> None:
    """Replay an exchange that failed with a 5xx."""
    print("\n=== Retry ===")
    request = httpx.Request("GET", "http://demo/flaky")
    envelope = client.send_envelope(request, BodyStrategy.of_text()).get()

    envelope.on_ko(lambda: print(f"first attempt returned {envelope.status_code}"))
    if envelope.is_5xx():
        retried = envelope.retry().get()
        retried.on_ok(lambda: print("retry succeeded"))
        print(retried.decode_for_status(200, Message).get())


async def demo_async(client: EasyHttpClient) -> None:
    """Transport faults come back as failures, never as raised exceptions."""
    print("\n=== Async ===")
    ok = await client.send_envelope_async(
        httpx.Request("GET", "http://demo/msg"), BodyStrategy.of_text()
    )
    down = await client.send_envelope_async(
        httpx.Request("GET", "http://demo/down"), BodyStrategy.of_text()
    )
    print(f"ok:   {ok.map(lambda envelope: envelope.status_code)}")
    print(f"down: {down.on_failure(lambda e: print(f'recovered from {e!r}'))}")


def main() -> None:
    setup_logging("INFO", "console")
    client = build_client()
    demo_decode(client)
    demo_retry(client)
    asyncio.run(demo_async(client))
    body = client.create_body(Message(message_id=1, created_at=datetime(2024, 1, 1)))
    print(f"\nBest-effort body: {body}")


if __name__ == "__main__":
    main()

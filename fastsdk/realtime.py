"""Client for the realtime WebSocket endpoint."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import AsyncIterable, AsyncIterator

from fastsdk.models.media import RealtimeRequest, RealtimeResponse
from fastsdk.ws import MessageType, WebSocketConn, websocket_client

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "wss://api.openai.com/v1"
DEFAULT_PATH = "/realtime"

RequestSource = "asyncio.Queue[RealtimeRequest | None] | AsyncIterable[RealtimeRequest | None]"


def _now_ms() -> int:
    return int(time.time() * 1000)


async def _incoming(requests) -> AsyncIterator[RealtimeRequest | None]:
    if isinstance(requests, asyncio.Queue):
        while True:
            yield await requests.get()
    else:
        async for request in requests:
            yield request


class RealtimeClient:
    """Relays frames between a caller and a realtime model session."""

    def __init__(
        self,
        model: str,
        key: str,
        base_url: str = "",
        path: str = "",
        proxy_url: str = "",
    ) -> None:
        logger.info("RealtimeClient model: %s", model)
        self.model = model
        self.key = key
        self.base_url = base_url or DEFAULT_BASE_URL
        self.path = path or DEFAULT_PATH
        self.proxy_url = proxy_url

    def websocket_url(self) -> str:
        url = f"{self.base_url}{self.path}?model={self.model}"
        return url.replace("https://", "wss://").replace("http://", "ws://")

    async def realtime(self, requests) -> AsyncIterator[RealtimeResponse]:
        """Connect and return an iterator over the frames the model sends.

        ``requests`` is an asyncio.Queue or an async iterable of RealtimeRequest;
        None, a request of type -1, or the end of the iterable closes the
        connection and ends the responses. A read error is yielded as a
        response carrying ``error`` and ends the responses too.
        """
        start = _now_ms()
        logger.info("Realtime model: %s start", self.model)
        header = {"Authorization": f"Bearer {self.key}", "OpenAI-Beta": "realtime=v1"}
        try:
            conn = await websocket_client(self.websocket_url(), header, 0, None, self.proxy_url)
        except Exception:
            logger.exception("Realtime model: %s connect failed", self.model)
            raise
        return self._exchange(conn, requests, start, _now_ms())

    async def _exchange(
        self, conn: WebSocketConn, requests, start: int, connected: int
    ) -> AsyncIterator[RealtimeResponse]:
        queue: asyncio.Queue[RealtimeResponse | None] = asyncio.Queue()
        writer = asyncio.create_task(self._write(conn, requests, queue))
        reader = asyncio.create_task(self._read(conn, queue, start, connected))
        try:
            while True:
                response = await queue.get()
                if response is None:
                    return
                yield response
                if response.error is not None:
                    return
        finally:
            for task in (writer, reader):
                task.cancel()
            await asyncio.gather(writer, reader, return_exceptions=True)
            try:
                await conn.close()
            except Exception:
                logger.exception("Realtime model: %s close failed", self.model)
            logger.info("Realtime model: %s totalTime: %d ms", self.model, _now_ms() - start)

    async def _write(self, conn: WebSocketConn, requests, queue: asyncio.Queue) -> None:
        async for request in _incoming(requests):
            if request is None or request.message_type == MessageType.END:
                break
            try:
                await conn.write_message(request.message_type, request.message)
            except Exception:
                logger.exception("Realtime model: %s write failed", self.model)
                return
        try:
            await conn.close()
        except Exception:
            logger.exception("Realtime model: %s close failed", self.model)
        await queue.put(None)

    async def _read(
        self, conn: WebSocketConn, queue: asyncio.Queue, start: int, connected: int
    ) -> None:
        while True:
            try:
                message_type, message = await conn.read_message()
            except Exception as exc:
                logger.error("Realtime model: %s read failed: %s", self.model, exc)
                end = _now_ms()
                await queue.put(
                    RealtimeResponse(
                        conn_time=connected - start,
                        duration=end - connected,
                        total_time=end - start,
                        error=exc,
                    )
                )
                return
            if message_type == MessageType.END:
                return
            end = _now_ms()
            await queue.put(
                RealtimeResponse(
                    message_type=message_type,
                    message=message,
                    conn_time=connected - start,
                    duration=end - connected,
                    total_time=end - start,
                )
            )
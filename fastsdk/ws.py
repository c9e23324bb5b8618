"""A thin WebSocket connection wrapper used by the streaming clients."""

from __future__ import annotations

import json
import logging
from enum import IntEnum
from typing import Any

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import ConnectionClosed

logger = logging.getLogger(__name__)

HANDSHAKE_TIMEOUT = 60.0


class MessageType(IntEnum):
    """WebSocket frame types; END means the connection has nothing more to give."""

    END = -1
    TEXT = 1
    BINARY = 2
    CLOSE = 8
    PING = 9
    PONG = 10


class WebSocketConn:
    """An open WebSocket connection."""

    def __init__(self, conn: ClientConnection) -> None:
        self._conn = conn
        self._closed = False

    async def _send(self, message_type: int, message: bytes | str) -> None:
        kind = MessageType(message_type)
        if kind is MessageType.TEXT:
            await self._conn.send(message.decode() if isinstance(message, bytes) else message)
        elif kind is MessageType.BINARY:
            await self._conn.send(message.encode() if isinstance(message, str) else message)
        elif kind is MessageType.PING:
            await self._conn.ping(message)
        elif kind is MessageType.PONG:
            await self._conn.pong(message)
        elif kind is MessageType.CLOSE:
            await self.close()
        else:
            raise ValueError(f"cannot send a frame of type {kind.name}")

    async def read_message(self) -> tuple[MessageType, bytes | None]:
        """Return the next frame's type and payload.

        A close by the peer raises ConnectionClosed; once closed locally this
        returns ``(MessageType.END, None)``.
        """
        try:
            data = await self._conn.recv()
        except ConnectionClosed:
            if self._closed:
                return MessageType.END, None
            logger.error("websocket closed by peer", exc_info=True)
            try:
                await self.close()
            except Exception:
                logger.exception("websocket close failed")
            raise
        except OSError:
            logger.error("websocket read failed", exc_info=True)
            return MessageType.END, None
        if isinstance(data, str):
            return MessageType.TEXT, data.encode()
        return MessageType.BINARY, bytes(data)

    async def write_message(self, message_type: int, message: bytes | str | None) -> None:
        """Send a frame; a type of 0 or a missing message sends nothing."""
        if message_type != 0 and message is not None:
            try:
                await self._send(message_type, message)
            except Exception:
                logger.exception("websocket write failed")
                raise

    async def write_json(self, message: Any) -> None:
        """Send ``message`` encoded as JSON in a text frame, unless it is None."""
        if message is not None:
            try:
                await self._conn.send(json.dumps(message))
            except Exception:
                logger.exception("websocket write failed")
                raise

    async def close(self) -> None:
        self._closed = True
        await self._conn.close()


async def websocket_client(
    ws_url: str,
    request_header: dict[str, str] | None = None,
    message_type: int = 0,
    message: bytes | str | None = None,
    proxy_url: str = "",
) -> WebSocketConn:
    """Open a connection and, if ``message`` is given, send it first."""
    logger.info("websocket_client ws_url: %s", ws_url)
    options: dict[str, Any] = {
        "additional_headers": request_header,
        "open_timeout": HANDSHAKE_TIMEOUT,
        "max_size": None,
    }
    if proxy_url:
        options["proxy"] = proxy_url
    try:
        raw = await connect(ws_url, **options)
    except Exception:
        logger.exception("websocket dial failed: %s", ws_url)
        raise

    conn = WebSocketConn(raw)
    if message is not None:
        try:
            await conn._send(message_type, message)
        except Exception:
            logger.exception("websocket first write failed")
            await conn.close()
            raise
    return conn
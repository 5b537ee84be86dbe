"""Global Socket.IO server for the attendance board.

Frontend convention:
- URL base: ws://<host>:8000
- Socket.IO path: settings.SOCKETIO_PATH (``/socket.io/`` by default)
- Auth: none; any client may connect, join and publish.

There is a single room, ``attendance-room``. Domain handlers live in
``parlour.realtime.handlers`` and publishers in ``parlour.realtime.events``;
this module only owns the server instance, the connection registry and the
connection lifecycle.
"""

from __future__ import annotations

import logging
from typing import Any

import socketio
from asgiref.sync import async_to_sync
from django.conf import settings

from parlour.realtime.registry import ConnectionRegistry

logger = logging.getLogger(__name__)

ATTENDANCE_ROOM = "attendance-room"


def _cors_allowed_origins(origins: list[str]) -> str | list[str]:
    # Engine.IO only treats the bare string "*" as a wildcard
    if "*" in origins:
        return "*"
    return origins


sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins=_cors_allowed_origins(settings.SOCKETIO_CORS_ALLOWED_ORIGINS),
    logger=False,
    engineio_logger=False,
)

registry = ConnectionRegistry()


@sio.event
async def connect(sid: str, environ: dict[str, Any], auth: Any | None = None):
    registry.register(sid)
    logger.info("Socket connected: %s (%d open)", sid, len(registry))


@sio.event
async def disconnect(sid: str, *args: Any):
    registry.unregister(sid)
    logger.info("Socket disconnected: %s (%d open)", sid, len(registry))


async def emit_to_room(room: str, event: str, payload: dict[str, Any]) -> None:
    await sio.emit(event, payload, room=room)


def emit_event_to_room(room: str, event: str, payload: dict[str, Any]) -> None:
    """Emit an event to a room from sync Django code."""

    async_to_sync(emit_to_room)(room, event, payload)


async def shutdown() -> None:
    registry.close()

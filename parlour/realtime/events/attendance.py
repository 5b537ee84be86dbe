from __future__ import annotations

import logging
from typing import Any

from asgiref.sync import async_to_sync

from parlour.attendance.events import ATTENDANCE_UPDATED
from parlour.attendance.events import AttendanceEvent
from parlour.realtime.socketio import ATTENDANCE_ROOM
from parlour.realtime.socketio import emit_to_room
from parlour.realtime.socketio import registry

logger = logging.getLogger(__name__)


def build_attendance_payload(event: AttendanceEvent, seq: int) -> dict[str, Any]:
    return event.with_sequence(seq).to_payload()


async def broadcast_attendance(event: AttendanceEvent) -> dict[str, Any]:
    """Send ``attendance-updated`` to everyone in the room, sender included."""

    payload = build_attendance_payload(event, registry.next_sequence())
    await emit_to_room(ATTENDANCE_ROOM, ATTENDANCE_UPDATED, payload)
    logger.info(
        "Broadcast %s for %s on %s (seq %s)",
        event.kind.value,
        event.employee_id,
        event.date,
        payload["seq"],
    )
    return payload


def publish_attendance_update(event: AttendanceEvent) -> dict[str, Any]:
    """Publish an attendance event from sync Django code."""

    return async_to_sync(broadcast_attendance)(event)

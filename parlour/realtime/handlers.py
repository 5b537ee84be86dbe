"""Attendance room handlers registered on the global Socket.IO server."""

from __future__ import annotations

import logging
from typing import Any

from parlour.attendance.events import JOIN_ATTENDANCE
from parlour.attendance.events import PUNCH_IN
from parlour.attendance.events import PUNCH_OUT
from parlour.attendance.events import AttendanceEvent
from parlour.attendance.events import InvalidAttendanceEvent
from parlour.attendance.events import PunchKind
from parlour.realtime.events.attendance import broadcast_attendance
from parlour.realtime.socketio import ATTENDANCE_ROOM
from parlour.realtime.socketio import registry
from parlour.realtime.socketio import sio

logger = logging.getLogger(__name__)


@sio.on(JOIN_ATTENDANCE)
async def join_attendance(sid: str, data: Any = None):
    if registry.join(sid, ATTENDANCE_ROOM) is None:
        return
    await sio.enter_room(sid, ATTENDANCE_ROOM)
    logger.info(
        "%s joined %s (%d members)",
        sid,
        ATTENDANCE_ROOM,
        len(registry.members(ATTENDANCE_ROOM)),
    )


async def _relay(sid: str, data: Any, kind: PunchKind) -> dict[str, Any] | None:
    try:
        event = AttendanceEvent.from_payload(data, kind=kind)
    except InvalidAttendanceEvent as exc:
        logger.warning("Dropping %s from %s: %s", kind.value, sid, exc)
        return None
    return await broadcast_attendance(event)


@sio.on(PUNCH_IN)
async def punch_in(sid: str, data: Any = None):
    await _relay(sid, data, PunchKind.PUNCH_IN)


@sio.on(PUNCH_OUT)
async def punch_out(sid: str, data: Any = None):
    await _relay(sid, data, PunchKind.PUNCH_OUT)

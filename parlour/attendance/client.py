"""Socket.IO client that keeps a local attendance board in sync with the hub.

Used by the ``watch_attendance`` management command and by kiosk scripts.
The board only reflects events received while connected.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Callable
from typing import Any

import socketio

from parlour.attendance.board import AttendanceBoard
from parlour.attendance.board import AttendanceRecord
from parlour.attendance.events import ATTENDANCE_UPDATED
from parlour.attendance.events import JOIN_ATTENDANCE
from parlour.attendance.events import PUNCH_IN
from parlour.attendance.events import PUNCH_OUT
from parlour.attendance.events import AttendanceEvent
from parlour.attendance.events import InvalidAttendanceEvent
from parlour.attendance.events import compute_total_hours
from parlour.attendance.events import describe
from parlour.attendance.events import format_clock_time

logger = logging.getLogger(__name__)


class AttendanceClient:
    def __init__(
        self,
        url: str,
        viewer_name: str = "",
        *,
        socketio_path: str = "socket.io",
        board: AttendanceBoard | None = None,
        client: Any | None = None,
        on_notify: Callable[[str, AttendanceEvent], None] | None = None,
        on_update: Callable[[AttendanceEvent, AttendanceRecord | None], None]
        | None = None,
    ) -> None:
        self.url = url
        self.viewer_name = viewer_name
        self.socketio_path = socketio_path
        self.board = board if board is not None else AttendanceBoard()
        self.client = client if client is not None else socketio.AsyncClient()
        self.on_notify = on_notify
        self.on_update = on_update
        self.notifications: list[str] = []
        self.last_seq: int | None = None

        self.client.on("connect", self._handle_connect)
        self.client.on(ATTENDANCE_UPDATED, self._handle_attendance_updated)

    async def connect(self) -> None:
        await self.client.connect(self.url, socketio_path=self.socketio_path)

    async def disconnect(self) -> None:
        await self.client.disconnect()

    async def wait(self) -> None:
        await self.client.wait()

    async def join(self) -> None:
        await self.client.emit(JOIN_ATTENDANCE)

    async def _handle_connect(self) -> None:
        # Room membership does not survive a reconnect.
        await self.join()

    async def _handle_attendance_updated(self, data: Any) -> AttendanceRecord | None:
        try:
            event = AttendanceEvent.from_payload(data)
        except InvalidAttendanceEvent as exc:
            logger.warning("Ignoring malformed attendance update: %s", exc)
            return None

        if event.seq is not None:
            if self.last_seq is not None and event.seq <= self.last_seq:
                logger.debug("Out of order update seq %s after %s", event.seq, self.last_seq)
            self.last_seq = event.seq

        record = self.board.apply(event)
        if self.on_update is not None:
            self.on_update(event, record)
        if event.employee_name != self.viewer_name:
            self._notify(event)
        return record

    def _notify(self, event: AttendanceEvent) -> None:
        message = describe(event)
        self.notifications.append(message)
        if self.on_notify is not None:
            self.on_notify(message, event)
        else:
            logger.info(message)

    async def punch_in(
        self,
        employee_id: Any,
        employee_name: str,
        when: dt.datetime | None = None,
    ) -> AttendanceEvent:
        event = AttendanceEvent.punch_in(
            employee_id,
            employee_name,
            when or dt.datetime.now().astimezone(),
        )
        self.board.apply(event)
        await self.client.emit(PUNCH_IN, event.to_payload())
        return event

    async def punch_out(
        self,
        employee_id: Any,
        employee_name: str,
        when: dt.datetime | None = None,
    ) -> AttendanceEvent:
        when = when or dt.datetime.now().astimezone()
        date = when.date().isoformat()
        record = self.board.get(employee_id, date)
        if record is None or not record.is_active:
            msg = f"{employee_name or employee_id} is not punched in on {date}"
            raise InvalidAttendanceEvent(msg)

        total_hours = compute_total_hours(record.punch_in, format_clock_time(when))
        event = AttendanceEvent.punch_out(employee_id, employee_name, when, total_hours)
        self.board.apply(event)
        await self.client.emit(PUNCH_OUT, event.to_payload())
        return event

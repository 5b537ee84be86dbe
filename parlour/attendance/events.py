"""Attendance event type shared by the hub, REST publishers and clients.

An event is transient: it exists only as an in-flight Socket.IO message and
is never written to the database. The wire format is camelCase to match the
browser clients:

    {"type": "punch-in", "employeeId": "1", "employeeName": "Asha",
     "date": "2024-05-01", "time": "09:00"}

Punch-out events additionally carry ``totalHours``. The hub stamps every
broadcast with ``seq``.
"""

from __future__ import annotations

import datetime as dt
import enum
from dataclasses import dataclass
from dataclasses import replace
from typing import Any

JOIN_ATTENDANCE = "join-attendance"
PUNCH_IN = "punch-in"
PUNCH_OUT = "punch-out"
ATTENDANCE_UPDATED = "attendance-updated"

CLOCK_TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M:%S %p")
MINUTES_PER_DAY = 24 * 60


class PunchKind(enum.StrEnum):
    PUNCH_IN = PUNCH_IN
    PUNCH_OUT = PUNCH_OUT


class InvalidAttendanceEvent(ValueError):
    """Raised when a punch payload cannot be turned into an AttendanceEvent."""


def parse_clock_time(value: str) -> dt.time:
    """Parse a wall-clock time as sent by clients ("09:00", "09:00 AM", ...)."""
    text = " ".join(str(value).strip().upper().split())
    for fmt in CLOCK_TIME_FORMATS:
        try:
            return dt.datetime.strptime(text, fmt).time()  # noqa: DTZ007
        except ValueError:
            continue
    msg = f"Invalid time: {value!r}"
    raise InvalidAttendanceEvent(msg)


def format_clock_time(value: dt.time | dt.datetime) -> str:
    return value.strftime("%H:%M")


def compute_total_hours(punch_in: str, punch_out: str) -> str:
    """Return the elapsed interval between two clock times, e.g. "8h" or "7h 30m".

    A punch-out earlier than the punch-in is taken to cross midnight.
    """
    start = parse_clock_time(punch_in)
    end = parse_clock_time(punch_out)
    minutes = (end.hour * 60 + end.minute) - (start.hour * 60 + start.minute)
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    hours, rest = divmod(minutes, 60)
    if rest:
        return f"{hours}h {rest}m"
    return f"{hours}h"


def _required_text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None or not str(value).strip():
        msg = f"Missing field: {key}"
        raise InvalidAttendanceEvent(msg)
    return str(value).strip()


@dataclass(frozen=True)
class AttendanceEvent:
    kind: PunchKind
    employee_id: str
    employee_name: str
    date: str
    time: str
    total_hours: str | None = None
    seq: int | None = None

    @classmethod
    def from_payload(
        cls,
        data: Any,
        kind: PunchKind | str | None = None,
    ) -> AttendanceEvent:
        """Build an event from a wire payload.

        ``kind`` overrides the payload's ``type``; the hub passes it because
        the event name already says which punch it is.
        """
        if not isinstance(data, dict):
            msg = "Attendance payload must be an object"
            raise InvalidAttendanceEvent(msg)

        raw_kind = kind or data.get("type")
        try:
            punch_kind = PunchKind(raw_kind)
        except ValueError as exc:
            msg = f"Unknown attendance event type: {raw_kind!r}"
            raise InvalidAttendanceEvent(msg) from exc

        date = _required_text(data, "date")
        try:
            dt.date.fromisoformat(date)
        except ValueError as exc:
            msg = f"Invalid date: {date!r}"
            raise InvalidAttendanceEvent(msg) from exc

        time = _required_text(data, "time")
        parse_clock_time(time)

        total_hours = None
        if punch_kind is PunchKind.PUNCH_OUT:
            raw_total = data.get("totalHours")
            if raw_total is not None and str(raw_total).strip():
                total_hours = str(raw_total).strip()

        seq = data.get("seq")
        return cls(
            kind=punch_kind,
            employee_id=_required_text(data, "employeeId"),
            employee_name=str(data.get("employeeName") or "").strip(),
            date=date,
            time=time,
            total_hours=total_hours,
            seq=seq if isinstance(seq, int) else None,
        )

    @classmethod
    def punch_in(
        cls,
        employee_id: Any,
        employee_name: str,
        when: dt.datetime,
    ) -> AttendanceEvent:
        return cls(
            kind=PunchKind.PUNCH_IN,
            employee_id=str(employee_id),
            employee_name=employee_name,
            date=when.date().isoformat(),
            time=format_clock_time(when),
        )

    @classmethod
    def punch_out(
        cls,
        employee_id: Any,
        employee_name: str,
        when: dt.datetime,
        total_hours: str | None = None,
    ) -> AttendanceEvent:
        return cls(
            kind=PunchKind.PUNCH_OUT,
            employee_id=str(employee_id),
            employee_name=employee_name,
            date=when.date().isoformat(),
            time=format_clock_time(when),
            total_hours=total_hours,
        )

    @property
    def key(self) -> tuple[str, str]:
        return (self.employee_id, self.date)

    def with_sequence(self, seq: int) -> AttendanceEvent:
        return replace(self, seq=seq)

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": self.kind.value,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "time": self.time,
            "date": self.date,
        }
        if self.kind is PunchKind.PUNCH_OUT:
            payload["totalHours"] = self.total_hours
        if self.seq is not None:
            payload["seq"] = self.seq
        return payload


def describe(event: AttendanceEvent) -> str:
    """Human readable notification line for an event."""
    if event.kind is PunchKind.PUNCH_IN:
        return f"{event.employee_name} punched in at {event.time}"
    if event.total_hours:
        return (
            f"{event.employee_name} punched out at {event.time} ({event.total_hours})"
        )
    return f"{event.employee_name} punched out at {event.time}"

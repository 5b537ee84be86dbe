"""Client-local attendance view.

Each connected client folds broadcast events into its own board. Nothing is
loaded from the server: a board created after an event was broadcast never
learns about it, so late joiners start empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from parlour.attendance.events import AttendanceEvent
from parlour.attendance.events import InvalidAttendanceEvent
from parlour.attendance.events import PunchKind
from parlour.attendance.events import compute_total_hours

logger = logging.getLogger(__name__)


@dataclass
class AttendanceRecord:
    employee_id: str
    employee_name: str
    date: str
    punch_in: str
    punch_out: str = ""
    total_hours: str = ""
    is_active: bool = True

    def to_dict(self) -> dict[str, object]:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "date": self.date,
            "punchIn": self.punch_in,
            "punchOut": self.punch_out,
            "totalHours": self.total_hours,
            "isActive": self.is_active,
        }


class AttendanceBoard:
    """Records keyed by ``(employee_id, date)``.

    A punch-in always replaces whatever the board holds for the pair, closed
    or not (last write wins). A punch-out closes the record for the pair and
    is ignored when there is none.
    """

    def __init__(self) -> None:
        self._records: dict[tuple[str, str], AttendanceRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def apply(self, event: AttendanceEvent) -> AttendanceRecord | None:
        if event.kind is PunchKind.PUNCH_IN:
            return self._punch_in(event)
        return self._punch_out(event)

    def _punch_in(self, event: AttendanceEvent) -> AttendanceRecord:
        previous = self._records.get(event.key)
        if previous is not None and previous.punch_in != event.time:
            logger.info(
                "Punch-in for %s on %s replaces earlier record (in %s, out %s)",
                event.employee_id,
                event.date,
                previous.punch_in,
                previous.punch_out or "-",
            )
        record = AttendanceRecord(
            employee_id=event.employee_id,
            employee_name=event.employee_name,
            date=event.date,
            punch_in=event.time,
        )
        self._records[event.key] = record
        return record

    def _punch_out(self, event: AttendanceEvent) -> AttendanceRecord | None:
        record = self._records.get(event.key)
        if record is None:
            logger.debug(
                "Ignoring punch-out for %s on %s without a punch-in",
                event.employee_id,
                event.date,
            )
            return None
        total_hours = event.total_hours
        if not total_hours:
            try:
                total_hours = compute_total_hours(record.punch_in, event.time)
            except InvalidAttendanceEvent:
                total_hours = ""
        record.punch_out = event.time
        record.total_hours = total_hours
        record.is_active = False
        return record

    def get(self, employee_id: object, date: str) -> AttendanceRecord | None:
        return self._records.get((str(employee_id), date))

    def is_working(self, employee_id: object, date: str) -> bool:
        record = self.get(employee_id, date)
        return bool(record and record.is_active)

    def records(self) -> list[AttendanceRecord]:
        return list(self._records.values())

    def currently_working(self) -> list[AttendanceRecord]:
        return [record for record in self._records.values() if record.is_active]

    def clear(self) -> None:
        self._records.clear()

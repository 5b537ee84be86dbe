import datetime as dt

import pytest

from parlour.attendance.events import AttendanceEvent
from parlour.attendance.events import InvalidAttendanceEvent
from parlour.attendance.events import PunchKind
from parlour.attendance.events import compute_total_hours
from parlour.attendance.events import describe
from parlour.attendance.events import parse_clock_time


def _payload(**overrides):
    data = {
        "type": "punch-in",
        "employeeId": 7,
        "employeeName": "Asha",
        "date": "2024-05-01",
        "time": "09:00",
    }
    data.update(overrides)
    return data


class TestFromPayload:
    def test_normalises_employee_id_to_string(self):
        event = AttendanceEvent.from_payload(_payload())
        assert event.kind is PunchKind.PUNCH_IN
        assert event.employee_id == "7"
        assert event.key == ("7", "2024-05-01")

    def test_kind_argument_overrides_payload_type(self):
        event = AttendanceEvent.from_payload(_payload(type="bogus"), kind="punch-out")
        assert event.kind is PunchKind.PUNCH_OUT

    def test_total_hours_only_kept_on_punch_out(self):
        punch_in = AttendanceEvent.from_payload(_payload(totalHours="8h"))
        punch_out = AttendanceEvent.from_payload(
            _payload(type="punch-out", time="17:00", totalHours="8h"),
        )
        assert punch_in.total_hours is None
        assert punch_out.total_hours == "8h"

    def test_missing_name_defaults_to_empty(self):
        data = _payload()
        del data["employeeName"]
        assert AttendanceEvent.from_payload(data).employee_name == ""

    @pytest.mark.parametrize(
        "data",
        [
            None,
            "punch-in",
            _payload(type="lunch"),
            _payload(date="01/05/2024"),
            _payload(time="nine"),
            _payload(employeeId=""),
            _payload(date=None),
        ],
    )
    def test_rejects_malformed_payloads(self, data):
        with pytest.raises(InvalidAttendanceEvent):
            AttendanceEvent.from_payload(data)


def test_to_payload_uses_wire_names():
    event = AttendanceEvent.from_payload(
        _payload(type="punch-out", time="17:00", totalHours="8h"),
    ).with_sequence(3)
    assert event.to_payload() == {
        "type": "punch-out",
        "employeeId": "7",
        "employeeName": "Asha",
        "time": "17:00",
        "date": "2024-05-01",
        "totalHours": "8h",
        "seq": 3,
    }


def test_punch_in_factory_formats_date_and_time():
    event = AttendanceEvent.punch_in(4, "Meera", dt.datetime(2024, 5, 1, 9, 5, 42))  # noqa: DTZ001
    assert event.to_payload() == {
        "type": "punch-in",
        "employeeId": "4",
        "employeeName": "Meera",
        "time": "09:05",
        "date": "2024-05-01",
    }


@pytest.mark.parametrize(
    ("start", "end", "expected"),
    [
        ("09:00", "17:00", "8h"),
        ("09:15", "17:45", "8h 30m"),
        ("09:00", "09:00", "0h"),
        ("22:00", "02:30", "4h 30m"),
        ("09:00 AM", "05:00 PM", "8h"),
    ],
)
def test_compute_total_hours(start, end, expected):
    assert compute_total_hours(start, end) == expected


def test_parse_clock_time_accepts_seconds_and_meridiem():
    assert parse_clock_time("09:00:30") == dt.time(9, 0, 30)
    assert parse_clock_time(" 5:05 pm ") == dt.time(17, 5)


def test_describe():
    punch_in = AttendanceEvent.from_payload(_payload())
    punch_out = AttendanceEvent.from_payload(
        _payload(type="punch-out", time="17:00", totalHours="8h"),
    )
    assert describe(punch_in) == "Asha punched in at 09:00"
    assert describe(punch_out) == "Asha punched out at 17:00 (8h)"

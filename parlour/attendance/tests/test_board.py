from parlour.attendance.board import AttendanceBoard
from parlour.attendance.events import AttendanceEvent


def punch_in(employee_id="1", date="2024-05-01", time="09:00", name="Asha"):
    return AttendanceEvent.from_payload(
        {
            "type": "punch-in",
            "employeeId": employee_id,
            "employeeName": name,
            "date": date,
            "time": time,
        },
    )


def punch_out(employee_id="1", date="2024-05-01", time="17:00", total=None, name="Asha"):
    return AttendanceEvent.from_payload(
        {
            "type": "punch-out",
            "employeeId": employee_id,
            "employeeName": name,
            "date": date,
            "time": time,
            "totalHours": total,
        },
    )


def test_punch_in_then_out_closes_record():
    board = AttendanceBoard()
    board.apply(punch_in())
    assert board.is_working("1", "2024-05-01")

    record = board.apply(punch_out(total="8h"))

    assert record is board.get("1", "2024-05-01")
    assert record.punch_in == "09:00"
    assert record.punch_out == "17:00"
    assert record.total_hours == "8h"
    assert record.is_active is False
    assert board.currently_working() == []


def test_punch_out_without_total_computes_it():
    board = AttendanceBoard()
    board.apply(punch_in(time="10:00"))
    record = board.apply(punch_out(time="13:30"))
    assert record.total_hours == "3h 30m"


def test_punch_out_without_punch_in_is_ignored():
    board = AttendanceBoard()
    assert board.apply(punch_out()) is None
    assert len(board) == 0


def test_second_punch_in_reopens_record():
    board = AttendanceBoard()
    board.apply(punch_in())
    board.apply(punch_out())

    record = board.apply(punch_in(time="18:00"))

    assert len(board) == 1
    assert record.is_active is True
    assert record.punch_in == "18:00"
    assert record.punch_out == ""
    assert record.total_hours == ""


def test_records_are_kept_per_date():
    board = AttendanceBoard()
    board.apply(punch_in(date="2024-05-01"))
    board.apply(punch_in(date="2024-05-02", time="08:30"))
    board.apply(punch_out(date="2024-05-01"))

    assert len(board) == 2
    assert not board.is_working("1", "2024-05-01")
    assert board.is_working("1", "2024-05-02")
    assert [r.date for r in board.currently_working()] == ["2024-05-02"]


def test_punch_out_for_other_employee_does_not_touch_record():
    board = AttendanceBoard()
    board.apply(punch_in(employee_id="1"))
    assert board.apply(punch_out(employee_id="2", name="Meera")) is None
    assert board.is_working("1", "2024-05-01")


def test_record_to_dict():
    board = AttendanceBoard()
    record = board.apply(punch_in())
    assert record.to_dict() == {
        "employeeId": "1",
        "employeeName": "Asha",
        "date": "2024-05-01",
        "punchIn": "09:00",
        "punchOut": "",
        "totalHours": "",
        "isActive": True,
    }

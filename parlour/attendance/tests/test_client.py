import datetime as dt

import pytest
from asgiref.sync import async_to_sync

from parlour.attendance.client import AttendanceClient
from parlour.attendance.events import ATTENDANCE_UPDATED
from parlour.attendance.events import JOIN_ATTENDANCE
from parlour.attendance.events import PUNCH_IN
from parlour.attendance.events import PUNCH_OUT
from parlour.attendance.events import InvalidAttendanceEvent


class FakeSocket:
    """Stands in for socketio.AsyncClient and records what is emitted."""

    def __init__(self):
        self.handlers = {}
        self.emitted = []
        self.connected_to = None

    def on(self, event, handler):
        self.handlers[event] = handler

    async def connect(self, url, socketio_path=None):
        self.connected_to = (url, socketio_path)
        await self.handlers["connect"]()

    async def disconnect(self):
        self.connected_to = None

    async def emit(self, event, data=None):
        self.emitted.append((event, data))

    def deliver(self, data):
        return async_to_sync(self.handlers[ATTENDANCE_UPDATED])(data)


@pytest.fixture
def socket():
    return FakeSocket()


@pytest.fixture
def attendance_client(socket):
    return AttendanceClient("http://hub.test", viewer_name="Asha", client=socket)


ASHA_IN = {
    "type": "punch-in",
    "employeeId": "1",
    "employeeName": "Asha",
    "date": "2024-05-01",
    "time": "09:00",
    "seq": 1,
}
MEERA_IN = {**ASHA_IN, "employeeId": "2", "employeeName": "Meera", "seq": 2}


def test_connect_joins_attendance_room(attendance_client, socket):
    async_to_sync(attendance_client.connect)()
    assert socket.connected_to == ("http://hub.test", "socket.io")
    assert socket.emitted == [(JOIN_ATTENDANCE, None)]


def test_update_is_applied_to_board(attendance_client, socket):
    record = socket.deliver(MEERA_IN)
    assert record.employee_name == "Meera"
    assert attendance_client.board.is_working("2", "2024-05-01")
    assert attendance_client.last_seq == 2


def test_own_updates_are_not_announced(attendance_client, socket):
    socket.deliver(ASHA_IN)
    socket.deliver(MEERA_IN)
    assert attendance_client.notifications == ["Meera punched in at 09:00"]
    assert len(attendance_client.board) == 2


def test_malformed_update_is_ignored(attendance_client, socket):
    assert socket.deliver({"type": "punch-in"}) is None
    assert len(attendance_client.board) == 0


def test_punch_in_and_out_emit_and_update_local_board(attendance_client, socket):
    start = dt.datetime(2024, 5, 1, 9, 0)  # noqa: DTZ001
    end = dt.datetime(2024, 5, 1, 17, 0)  # noqa: DTZ001

    async_to_sync(attendance_client.punch_in)(1, "Asha", start)
    event = async_to_sync(attendance_client.punch_out)(1, "Asha", end)

    assert event.total_hours == "8h"
    assert [name for name, _ in socket.emitted] == [PUNCH_IN, PUNCH_OUT]
    assert socket.emitted[1][1]["totalHours"] == "8h"
    record = attendance_client.board.get(1, "2024-05-01")
    assert record.punch_out == "17:00"
    assert record.is_active is False


def test_punch_out_requires_open_record(attendance_client, socket):
    with pytest.raises(InvalidAttendanceEvent):
        async_to_sync(attendance_client.punch_out)(
            1,
            "Asha",
            dt.datetime(2024, 5, 1, 17, 0),  # noqa: DTZ001
        )
    assert socket.emitted == []

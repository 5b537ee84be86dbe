"""Connection bookkeeping for the attendance hub.

python-socketio already tracks room membership internally; the registry keeps
our own view of it so the health check and the room endpoint can report
counts without reaching into the server's manager, and so broadcasts can be
numbered.
"""

from __future__ import annotations

import datetime as dt
import itertools
import logging
from dataclasses import dataclass
from dataclasses import field

logger = logging.getLogger(__name__)


@dataclass
class Connection:
    sid: str
    connected_at: dt.datetime
    rooms: set[str] = field(default_factory=set)


class ConnectionRegistry:
    def __init__(self) -> None:
        self._connections: dict[str, Connection] = {}
        self._sequence = itertools.count(1)
        self._last_sequence = 0
        self.closed = False

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, sid: object) -> bool:
        return sid in self._connections

    def register(self, sid: str) -> Connection:
        connection = self._connections.get(sid)
        if connection is None:
            connection = Connection(sid=sid, connected_at=dt.datetime.now(tz=dt.UTC))
            self._connections[sid] = connection
        self.closed = False
        return connection

    def unregister(self, sid: str) -> Connection | None:
        return self._connections.pop(sid, None)

    def join(self, sid: str, room: str) -> Connection | None:
        """Record that ``sid`` entered ``room``.

        Joins from sids that are not connected (for instance one handled after
        its disconnect) are ignored and return ``None``.
        """
        connection = self._connections.get(sid)
        if connection is None:
            logger.debug("Ignoring join of %s from unknown sid %s", room, sid)
            return None
        connection.rooms.add(room)
        return connection

    def members(self, room: str) -> list[str]:
        return [
            connection.sid
            for connection in self._connections.values()
            if room in connection.rooms
        ]

    def next_sequence(self) -> int:
        self._last_sequence = next(self._sequence)
        return self._last_sequence

    @property
    def last_sequence(self) -> int:
        return self._last_sequence

    def snapshot(self, room: str) -> dict[str, object]:
        return {
            "room": room,
            "members": len(self.members(room)),
            "connections": len(self._connections),
            "last_seq": self._last_sequence,
        }

    def close(self) -> None:
        if self._connections:
            logger.info("Dropping %d realtime connection(s)", len(self._connections))
        self._connections.clear()
        self.closed = True

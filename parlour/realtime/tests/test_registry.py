import logging

from parlour.realtime.registry import ConnectionRegistry


def test_register_join_and_unregister():
    registry = ConnectionRegistry()
    registry.register("a")
    registry.register("b")
    registry.join("b", "attendance-room")
    registry.join("a", "attendance-room")
    registry.join("a", "attendance-room")

    assert len(registry) == 2
    assert sorted(registry.members("attendance-room")) == ["a", "b"]

    assert registry.unregister("a").sid == "a"
    assert registry.unregister("a") is None
    assert registry.members("attendance-room") == ["b"]
    assert "a" not in registry


def test_join_from_unknown_sid_is_ignored(caplog):
    registry = ConnectionRegistry()
    registry.register("a")
    registry.unregister("a")

    with caplog.at_level(logging.DEBUG, logger="parlour.realtime.registry"):
        assert registry.join("a", "attendance-room") is None

    assert "a" not in registry
    assert registry.members("attendance-room") == []
    assert registry.snapshot("attendance-room")["connections"] == 0
    assert "unknown sid a" in caplog.text


def test_sequence_numbers_increase():
    registry = ConnectionRegistry()
    assert [registry.next_sequence() for _ in range(3)] == [1, 2, 3]
    assert registry.last_sequence == 3


def test_snapshot_and_close():
    registry = ConnectionRegistry()
    registry.register("a")
    registry.register("b")
    registry.join("a", "attendance-room")

    assert registry.snapshot("attendance-room") == {
        "room": "attendance-room",
        "members": 1,
        "connections": 2,
        "last_seq": 0,
    }

    registry.close()
    assert registry.closed is True
    assert len(registry) == 0

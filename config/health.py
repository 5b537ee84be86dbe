from __future__ import annotations

from typing import Any

from django.db import connection
from django.http import JsonResponse

from parlour.realtime.socketio import ATTENDANCE_ROOM
from parlour.realtime.socketio import registry


def check_db() -> dict[str, Any]:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True}


def check_realtime() -> dict[str, Any]:
    if registry.closed:
        return {"ok": False, "error": "realtime hub is shut down"}
    return {"ok": True, **registry.snapshot(ATTENDANCE_ROOM)}


def health(request):
    components = {"db": check_db(), "realtime": check_realtime()}

    all_ok = all(v.get("ok", False) for v in components.values())
    some_ok = any(v.get("ok", False) for v in components.values())

    status = "ok" if all_ok else ("degraded" if some_ok else "down")
    http_status = 200 if all_ok else 503

    return JsonResponse(
        {"status": status, "components": components},
        status=http_status,
    )

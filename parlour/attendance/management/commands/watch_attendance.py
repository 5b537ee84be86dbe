import asyncio
import logging

from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils.translation import gettext as _

from parlour.attendance.client import AttendanceClient

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = _("Join the attendance room and print every update as it arrives")

    def add_arguments(self, parser):
        parser.add_argument("url", help="Server URL, e.g. http://localhost:8000")
        parser.add_argument(
            "--path",
            default=settings.SOCKETIO_PATH,
            help="Socket.IO path the hub is mounted on",
        )
        parser.add_argument(
            "--name",
            default="",
            help="Viewer name; updates about this name are not announced",
        )

    def handle(self, *args, **options):
        client = AttendanceClient(
            options["url"],
            viewer_name=options["name"],
            socketio_path=options["path"],
            on_notify=self._announce,
            on_update=lambda event, record: self._print_board(client),
        )
        try:
            asyncio.run(self._watch(client))
        except KeyboardInterrupt:
            self.stdout.write("")
        self.stdout.write(self.style.SUCCESS("Stopped watching attendance"))

    async def _watch(self, client: AttendanceClient):
        await client.connect()
        self.stdout.write(self.style.SUCCESS(f"Connected to {client.url}"))
        try:
            await client.wait()
        finally:
            await client.disconnect()

    def _announce(self, message, event):
        self.stdout.write(self.style.NOTICE(message))

    def _print_board(self, client: AttendanceClient):
        working = client.board.currently_working()
        if not working:
            self.stdout.write("  nobody is punched in")
            return
        for record in working:
            self.stdout.write(
                f"  {record.employee_name or record.employee_id} since "
                f"{record.punch_in} ({record.date})",
            )

from datetime import datetime

from ...application.ports.clock import Clock


class SystemClock(Clock):
    """Local wall-clock time, naive like the appointment instants."""

    def now(self) -> datetime:
        return datetime.now()

"""Event log — bounded store of generation diagnostics.

The reporter appends every event here. Callers inspect it afterwards with
``query`` (e.g. all ``ScanFailed`` events of a run) or ``stats`` (counts per
event type, printed by ``docnav --debug``).

Thread Safety:
    All methods take a ``threading.Lock``, so one log may be shared by
    several generator calls.

"""

import threading
from collections import deque
from typing import Any

from docnav.observability.events import DiagnosticEvent


class EventLog:
    """Ring buffer of diagnostic events; the oldest are dropped when full.

    Args:
        max_events: Maximum number of events to retain.

    """

    __slots__ = ("_events", "_lock", "_max_events")

    def __init__(self, max_events: int = 1_000) -> None:
        self._max_events = max_events
        self._events: deque[DiagnosticEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: DiagnosticEvent) -> None:
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        limit: int = 100,
    ) -> list[DiagnosticEvent]:
        """Return up to *limit* events, newest first, optionally of one type."""
        with self._lock:
            matching = [
                event
                for event in reversed(self._events)
                if event_type is None or isinstance(event, event_type)
            ]
        return matching[:limit]

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def stats(self) -> dict[str, Any]:
        """Event totals: ``{"total", "max_events", "by_type": {name: count}}``."""
        with self._lock:
            names = [type(event).__name__ for event in self._events]

        by_type: dict[str, int] = {}
        for name in names:
            by_type[name] = by_type.get(name, 0) + 1
        return {"total": len(names), "max_events": self._max_events, "by_type": by_type}

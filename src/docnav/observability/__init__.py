"""Diagnostics — generation events, event log, and the debug reporter.

Quick Start:
    >>> from docnav.observability import DiagnosticReporter, EventLog, RootMissing
    >>> log = EventLog()
    >>> reporter = DiagnosticReporter(log, debug=True)
    >>> # pass reporter= to docnav.generate_nav(...) and inspect
    >>> # log.query(event_type=RootMissing) afterwards

"""

from docnav.observability.events import (
    DiagnosticEvent,
    RootMissing,
    ScanCompleted,
    ScanFailed,
    ScanStarted,
    now_ns,
)
from docnav.observability.log import EventLog
from docnav.observability.reporter import DiagnosticReporter

__all__ = [
    "DiagnosticEvent",
    "DiagnosticReporter",
    "EventLog",
    "RootMissing",
    "ScanCompleted",
    "ScanFailed",
    "ScanStarted",
    "now_ns",
]

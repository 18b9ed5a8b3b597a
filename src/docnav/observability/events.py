"""Diagnostic event model for nav and sidebar generation.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Events are informational only. Nothing in the builders reads them back.

"""

import time
from dataclasses import dataclass

from docnav._types import ScanKind


@dataclass(frozen=True, slots=True)
class ScanStarted:
    """A builder started walking the docs root.

    Attributes:
        kind: Which artifact is being generated.
        root: Absolute docs root path.
        max_depth: Effective (clamped) traversal depth.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: ScanKind
    root: str
    max_depth: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class RootMissing:
    """The configured docs root does not exist; the result is empty.

    Attributes:
        kind: Which artifact was being generated.
        root: Absolute docs root path that was not found.
        cwd: Working directory at the time of the scan.
        available: Entries of the working directory, to hint at typos.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: ScanKind
    root: str
    cwd: str
    available: tuple[str, ...]
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ScanFailed:
    """A builder raised part way; the partial result was kept.

    Attributes:
        kind: Which artifact was being generated.
        root: Absolute docs root path.
        error: ``repr`` of the exception.
        entries_kept: Number of top-level entries produced before the failure.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: ScanKind
    root: str
    error: str
    entries_kept: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ScanCompleted:
    """A builder finished.

    Attributes:
        kind: Which artifact was generated.
        root: Absolute docs root path.
        entries: Number of top-level nav nodes or sidebar keys.
        duration_ms: Wall time of the scan in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: ScanKind
    root: str
    entries: int
    duration_ms: float
    timestamp_ns: int


type DiagnosticEvent = ScanStarted | RootMissing | ScanFailed | ScanCompleted


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()

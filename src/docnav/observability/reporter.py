"""Diagnostic reporter — records generation events and echoes them in debug mode.

Every event is appended to an ``EventLog``. When ``debug`` is set, a
``[docnav]`` line is also printed to stderr. Reporting never changes what the
builders return.

"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Any, TextIO

from docnav.observability.events import (
    RootMissing,
    ScanCompleted,
    ScanFailed,
    ScanStarted,
    now_ns,
)
from docnav.observability.log import EventLog

if TYPE_CHECKING:
    from pathlib import Path

    from docnav._types import ScanKind

_PREFIX = "[docnav]"


class DiagnosticReporter:
    """Records generation diagnostics.

    Args:
        log: The EventLog to store events in. A private log is created
            when omitted.
        debug: Echo diagnostics to *stream*.
        stream: Output for debug lines (defaults to ``sys.stderr`` at print time).

    """

    __slots__ = ("_debug", "_log", "_stream")

    def __init__(
        self,
        log: EventLog | None = None,
        *,
        debug: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        self._log = log if log is not None else EventLog()
        self._debug = debug
        self._stream = stream

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    @property
    def debug(self) -> bool:
        return self._debug

    def message(self, text: str, payload: Any = None) -> None:
        """Print a free-form debug line, optionally followed by *payload* as JSON."""
        if not self._debug:
            return
        if payload is not None:
            text = f"{text} {json.dumps(payload, ensure_ascii=False, default=str)}"
        self._print(text)

    # ----- Scan lifecycle -----

    def scan_started(self, kind: ScanKind, root: Path, max_depth: int) -> None:
        self._log.append(ScanStarted(
            kind=kind, root=str(root), max_depth=max_depth, timestamp_ns=now_ns(),
        ))
        self.message(f"Generating {kind} from: {root}")

    def root_missing(self, kind: ScanKind, root: Path, cwd: Path) -> None:
        """Record a missing docs root, listing the working directory for context."""
        try:
            available = tuple(sorted(p.name for p in cwd.iterdir()))
        except OSError:
            available = ()
        self._log.append(RootMissing(
            kind=kind,
            root=str(root),
            cwd=str(cwd),
            available=available,
            timestamp_ns=now_ns(),
        ))
        self.message(f"Documentation directory not found: {root}")
        self.message(f"Current working directory: {cwd}")
        self.message(f"Available directories: {', '.join(available)}")

    def scan_failed(
        self,
        kind: ScanKind,
        root: Path,
        error: BaseException,
        entries_kept: int,
    ) -> None:
        self._log.append(ScanFailed(
            kind=kind,
            root=str(root),
            error=repr(error),
            entries_kept=entries_kept,
            timestamp_ns=now_ns(),
        ))
        self.message(
            f"Error generating {kind} ({entries_kept} kept): {error!r}",
        )

    def scan_completed(
        self,
        kind: ScanKind,
        root: Path,
        entries: int,
        duration_ms: float,
    ) -> None:
        self._log.append(ScanCompleted(
            kind=kind,
            root=str(root),
            entries=entries,
            duration_ms=duration_ms,
            timestamp_ns=now_ns(),
        ))
        self.message(f"Generated {kind}: {entries} entries in {duration_ms:.1f}ms")

    def _print(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        print(f"{_PREFIX} {text}", file=stream)

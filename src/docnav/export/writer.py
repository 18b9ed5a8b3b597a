"""Output writer — serialise generated nav and sidebar data.

Renders the plain data returned by ``docnav.app`` as JSON or YAML, ready to
be loaded by a site configuration.  Key order is preserved in both formats
so output is byte-identical across runs for the same tree.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

import yaml

from docnav._errors import ExportError

type OutputFormat = Literal["json", "yaml"]

FORMATS: tuple[str, ...] = ("json", "yaml")

# Filename suffix -> format
_SUFFIX_FORMATS: dict[str, OutputFormat] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


@dataclass(frozen=True, slots=True)
class WrittenFile:
    """Record of a single written output file.

    Attributes:
        path: Absolute path of the written file.
        format: Serialisation format used.
        size_bytes: File size in bytes.
        duration_ms: Time to render and write in milliseconds.

    """

    path: Path
    format: OutputFormat
    size_bytes: int
    duration_ms: float


def render(data: Any, fmt: str = "json") -> str:
    """Serialise *data* in the given format.

    Raises:
        ExportError: For an unsupported format.

    """
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    msg = f"Unsupported output format {fmt!r} (expected one of {', '.join(FORMATS)})"
    raise ExportError(msg)


def format_for_path(path: Path) -> OutputFormat:
    """Infer the output format from a filename suffix.

    Raises:
        ExportError: If the suffix is not recognised.

    """
    fmt = _SUFFIX_FORMATS.get(path.suffix.lower())
    if fmt is None:
        msg = f"Cannot infer output format from {path.name!r}; pass a format explicitly"
        raise ExportError(msg)
    return fmt


def write_output(data: Any, path: Path, fmt: str | None = None) -> WrittenFile:
    """Render *data* and write it to *path*, creating parent directories.

    Raises:
        ExportError: For an unsupported format or an unwritable path.

    """
    resolved = fmt if fmt is not None else format_for_path(path)
    t0 = time.perf_counter()
    payload = render(data, resolved).encode("utf-8")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError as exc:
        msg = f"Cannot write {path}: {exc}"
        raise ExportError(msg) from exc
    elapsed = (time.perf_counter() - t0) * 1000

    return WrittenFile(
        path=path.resolve(),
        format=resolved,  # type: ignore[arg-type]
        size_bytes=len(payload),
        duration_ms=elapsed,
    )

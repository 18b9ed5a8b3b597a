"""Docnav entry points — generate nav, sidebar, or both.

Each call resolves its configuration, re-reads the docs tree, and returns
plain data in the VitePress theme-config shape::

    import docnav

    docnav.generate_nav(docs_dir="docs", max_depth=2)
    docnav.generate_sidebar(docsDir="docs", includeRootFiles=True)
    docnav.generate_site_config(config)     # {"nav": [...], "sidebar": {...}}

None of them raise for filesystem problems: a missing docs root yields an
empty result, and a failure part way through the walk yields everything
built before it. Both conditions are reported through the
``DiagnosticReporter``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docnav.build.nav import NavBuilder
from docnav.build.sidebar import SidebarBuilder
from docnav.config import build_config
from docnav.naming import namer_for, orderer_for
from docnav.observability.reporter import DiagnosticReporter
from docnav.tree.scanner import TreeScanner

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from docnav._types import NavData, ScanKind, SidebarData
    from docnav.config import NavConfig


@dataclass(frozen=True, slots=True)
class GenerationHooks:
    """Optional callbacks around ``generate_site_config``.

    Attributes:
        on_start: Called with the resolved config before scanning.
        on_complete: Called with the ``{"nav", "sidebar"}`` result.
        on_error: Called with each exception a builder stopped on.

    Exceptions raised by a hook propagate to the caller.

    """

    on_start: Callable[[NavConfig], None] | None = None
    on_complete: Callable[[dict[str, Any]], None] | None = None
    on_error: Callable[[Exception], None] | None = None


def generate_nav(
    config: NavConfig | None = None,
    *,
    reporter: DiagnosticReporter | None = None,
    **overrides: Any,
) -> NavData:
    """Generate the top navigation list.

    Args:
        config: Base configuration. Defaults to ``NavConfig()``.
        reporter: Receives diagnostics. One honouring ``config.debug`` is
            created when omitted.
        **overrides: NavConfig fields, by field name or camelCase option name.

    Returns:
        ``[{"text", "link"} | {"text", "items": [...]}, ...]``

    Raises:
        ConfigError: Only for unknown override names or invalid values.

    """
    resolved = build_config(config, **overrides)
    return _generate_nav(resolved, _reporter_for(resolved, reporter))


def generate_sidebar(
    config: NavConfig | None = None,
    *,
    reporter: DiagnosticReporter | None = None,
    **overrides: Any,
) -> SidebarData:
    """Generate the sidebar mapping.

    Args:
        config: Base configuration. Defaults to ``NavConfig()``.
        reporter: Receives diagnostics. One honouring ``config.debug`` is
            created when omitted.
        **overrides: NavConfig fields, by field name or camelCase option name.

    Returns:
        ``{"/dir/": [{"text", "collapsed", "items": [...]}], "/": [{"text", "link"}]}``

    Raises:
        ConfigError: Only for unknown override names or invalid values.

    """
    resolved = build_config(config, **overrides)
    return _generate_sidebar(resolved, _reporter_for(resolved, reporter))


def generate_site_config(
    config: NavConfig | None = None,
    *,
    reporter: DiagnosticReporter | None = None,
    hooks: GenerationHooks | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Generate ``{"nav": ..., "sidebar": ...}`` from one configuration."""
    resolved = build_config(config, **overrides)
    active = _reporter_for(resolved, reporter)
    hooks = hooks if hooks is not None else GenerationHooks()

    if hooks.on_start is not None:
        hooks.on_start(resolved)

    result = {
        "nav": _generate_nav(resolved, active, on_error=hooks.on_error),
        "sidebar": _generate_sidebar(resolved, active, on_error=hooks.on_error),
    }

    if hooks.on_complete is not None:
        hooks.on_complete(result)
    return result


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def _reporter_for(
    config: NavConfig,
    reporter: DiagnosticReporter | None,
) -> DiagnosticReporter:
    if reporter is not None:
        return reporter
    return DiagnosticReporter(debug=config.debug)


def _generate_nav(
    config: NavConfig,
    reporter: DiagnosticReporter,
    *,
    on_error: Callable[[Exception], None] | None = None,
) -> NavData:
    def entries(scanner: TreeScanner) -> Iterable[Any]:
        return NavBuilder(scanner, namer_for(config)).iter_nodes()

    nodes = _collect("nav", config, reporter, entries, on_error)
    nav = [node.to_dict() for node in nodes]
    reporter.message("Generated navigation structure:", nav)
    return nav


def _generate_sidebar(
    config: NavConfig,
    reporter: DiagnosticReporter,
    *,
    on_error: Callable[[Exception], None] | None = None,
) -> SidebarData:
    def entries(scanner: TreeScanner) -> Iterable[Any]:
        builder = SidebarBuilder(scanner, namer_for(config), orderer_for(config))
        return builder.iter_entries()

    pairs = _collect("sidebar", config, reporter, entries, on_error)
    sidebar = {key: [item.to_dict() for item in value] for key, value in pairs}
    reporter.message("Generated sidebar structure:", sidebar)
    return sidebar


def _collect(
    kind: ScanKind,
    config: NavConfig,
    reporter: DiagnosticReporter,
    entries: Callable[[TreeScanner], Iterable[Any]],
    on_error: Callable[[Exception], None] | None,
) -> list[Any]:
    """Drain a builder's entries, keeping what was produced before any failure."""
    root = config.docs_path
    reporter.scan_started(kind, root, config.max_depth)

    scanner = TreeScanner(config)
    t0 = time.perf_counter()
    collected: list[Any] = []
    try:
        # is_dir() returns False only for missing paths; EACCES still raises
        if not scanner.root_exists():
            reporter.root_missing(kind, root, Path.cwd())
            return []
        for entry in entries(scanner):
            collected.append(entry)
    except Exception as exc:
        reporter.scan_failed(kind, root, exc, len(collected))
        if on_error is not None:
            on_error(exc)
        return collected

    reporter.scan_completed(
        kind, root, len(collected), (time.perf_counter() - t0) * 1000,
    )
    return collected

"""Tests for docnav.app — public entry points, failure handling, hooks."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from docnav._errors import ConfigError
from docnav.app import GenerationHooks, generate_nav, generate_sidebar, generate_site_config
from docnav.config import NavConfig
from docnav.observability import DiagnosticReporter, EventLog, RootMissing, ScanCompleted, ScanFailed
from docnav.tree.scanner import DirectoryEntry, TreeScanner


@pytest.fixture
def reporter() -> DiagnosticReporter:
    return DiagnosticReporter(EventLog())


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------


class TestSiteConfig:
    """generate_site_config — nav and sidebar from one configuration."""

    def test_guide_example(self, guide_docs: Path) -> None:
        result = generate_site_config(docs_dir=guide_docs, maxDepth=1)
        assert result["nav"] == [{"text": "Guide", "link": "/guide/"}]
        assert result["sidebar"] == {
            "/guide/": [{
                "text": "Guide",
                "collapsed": True,
                "items": [
                    {"text": "Guide Overview", "link": "/guide/"},
                    {"text": "Setup", "link": "/guide/setup"},
                ],
            }],
        }

    def test_deterministic(self, docs: Path, make_tree) -> None:
        make_tree(
            docs,
            "guide/basics/index.md", "guide/basics/b.md", "guide/basics/a.md",
            "api/v1/index.md", "api/v2/ref.md", "about.md",
        )
        config = NavConfig(docs_dir=docs, max_depth=2, include_root_files=True)
        first = json.dumps(generate_site_config(config))
        second = json.dumps(generate_site_config(config))
        assert first == second

    def test_camel_case_overrides(self, guide_docs: Path) -> None:
        nav = generate_nav(docsDir=guide_docs, maxDepth=1, formatDisplayName=str.upper)
        assert nav == [{"text": "GUIDE", "link": "/guide/"}]

    def test_unknown_override_raises(self, guide_docs: Path) -> None:
        with pytest.raises(ConfigError):
            generate_nav(docs_dir=guide_docs, depth=2)

    def test_invalid_override_value_raises(self, guide_docs: Path) -> None:
        with pytest.raises(ConfigError, match="Invalid"):
            generate_nav(docs_dir=guide_docs, maxDepth="two")


class TestNavigationProperties:
    """Depth, ignore, promotion and pruning across both outputs."""

    def test_end_to_end_depth_two(self, tmp_path: Path, make_tree) -> None:
        # docs/guide/{index,setup}.md with max_depth=2 puts guide at depth 1,
        # below the ceiling, so the guide directory itself is not a leaf.
        docs = make_tree(tmp_path / "docs", "guide/index.md", "guide/setup.md")
        result = generate_site_config(docs_dir=docs, max_depth=2)
        assert result == {"nav": [], "sidebar": {}}

    def test_end_to_end_section_root(self, tmp_path: Path, make_tree) -> None:
        docs = make_tree(tmp_path / "docs", "section/guide/index.md", "section/guide/setup.md")
        result = generate_site_config(docs_dir=docs, max_depth=2)
        assert result["nav"] == [
            {"text": "Section", "items": [{"text": "Guide", "link": "/section/guide/"}]},
        ]
        assert result["sidebar"]["/section/guide/"][0]["items"] == [
            {"text": "Guide Overview", "link": "/section/guide/"},
            {"text": "Setup", "link": "/section/guide/setup"},
        ]

    def test_depth_ceiling(self, docs: Path, make_tree) -> None:
        make_tree(docs, "guide/deep/index.md", "guide/deep/page.md", "guide/deep/deeper/index.md")
        result = generate_site_config(docs_dir=docs, max_depth=1)
        assert result == {"nav": [], "sidebar": {}}

    def test_ignored_node_modules(self, docs: Path, make_tree) -> None:
        make_tree(docs, "node_modules/index.md", "node_modules/readme.md")
        result = generate_site_config(docs_dir=docs, max_depth=1)
        assert result == {"nav": [], "sidebar": {}}

    def test_overview_promotion(self, docs: Path, make_tree) -> None:
        make_tree(docs, "guide/index.md")
        result = generate_site_config(docs_dir=docs, max_depth=1)
        assert result["nav"] == [{"text": "Guide", "link": "/guide/"}]
        assert result["sidebar"]["/guide/"][0]["items"] == [
            {"text": "Guide Overview", "link": "/guide/"},
        ]

    def test_empty_pruning(self, docs: Path, make_tree) -> None:
        make_tree(docs, "empty/nested/deeper/", "guide/index.md")
        for depth in (1, 2, 3):
            result = generate_site_config(docs_dir=docs, max_depth=depth)
            assert all(node["text"] != "Empty" for node in result["nav"])
            assert not any(key.startswith("/empty/") for key in result["sidebar"])


# ---------------------------------------------------------------------------
# Missing root
# ---------------------------------------------------------------------------


class TestMissingRoot:
    """A missing docs root yields empty results and a diagnostic."""

    def test_empty_results(self, tmp_path: Path) -> None:
        missing = tmp_path / "nope"
        assert generate_nav(docs_dir=missing) == []
        assert generate_sidebar(docs_dir=missing) == {}
        assert generate_site_config(docs_dir=missing) == {"nav": [], "sidebar": {}}

    def test_reported(self, tmp_path: Path, reporter: DiagnosticReporter) -> None:
        generate_site_config(docs_dir=tmp_path / "nope", reporter=reporter)
        events = reporter.log.query(event_type=RootMissing)
        assert sorted(e.kind for e in events) == ["nav", "sidebar"]
        assert events[0].root == str(tmp_path / "nope")


# ---------------------------------------------------------------------------
# Failures part way through
# ---------------------------------------------------------------------------


def _fail_on(name: str):
    def formatter(raw: str) -> str:
        if raw == name:
            raise PermissionError(f"denied: {raw}")
        return raw.title()

    return formatter


class TestPartialResults:
    """Exceptions inside a builder keep what was built before them."""

    def test_nav_partial(self, docs: Path, make_tree, reporter: DiagnosticReporter) -> None:
        make_tree(docs, "alpha/index.md", "broken/index.md", "gamma/index.md")
        nav = generate_nav(
            docs_dir=docs, max_depth=1, format_display_name=_fail_on("broken"), reporter=reporter,
        )
        assert nav == [{"text": "Alpha", "link": "/alpha/"}]
        (failure,) = reporter.log.query(event_type=ScanFailed)
        assert failure.kind == "nav"
        assert failure.entries_kept == 1
        assert "PermissionError" in failure.error

    def test_sidebar_partial(self, docs: Path, make_tree, reporter: DiagnosticReporter) -> None:
        make_tree(docs, "alpha/a.md", "broken/b.md", "gamma/c.md")
        sidebar = generate_sidebar(
            docs_dir=docs, max_depth=1, format_display_name=_fail_on("broken"), reporter=reporter,
        )
        assert list(sidebar) == ["/alpha/"]
        assert reporter.log.query(event_type=ScanCompleted) == []

    def test_filesystem_error(self, docs: Path, make_tree, reporter: DiagnosticReporter) -> None:
        make_tree(docs, "guide/index.md")
        with patch.object(DirectoryEntry, "has_overview", side_effect=OSError("gone")):
            nav = generate_nav(docs_dir=docs, max_depth=1, reporter=reporter)
        assert nav == []
        assert len(reporter.log.query(event_type=ScanFailed)) == 1

    def test_unreadable_root(self, docs: Path, make_tree, reporter: DiagnosticReporter) -> None:
        make_tree(docs, "guide/index.md")
        denied = PermissionError(13, "Permission denied", str(docs))
        with patch.object(TreeScanner, "root_exists", side_effect=denied):
            nav = generate_nav(docs_dir=docs, max_depth=1, reporter=reporter)
            sidebar = generate_sidebar(docs_dir=docs, max_depth=1, reporter=reporter)
        assert nav == []
        assert sidebar == {}
        assert reporter.log.query(event_type=RootMissing) == []
        failures = reporter.log.query(event_type=ScanFailed)
        assert sorted(f.kind for f in failures) == ["nav", "sidebar"]
        assert all(f.entries_kept == 0 for f in failures)

    def test_unreadable_root_reaches_error_hook(self, docs: Path, make_tree) -> None:
        make_tree(docs, "guide/index.md")
        errors: list[Exception] = []
        with patch.object(TreeScanner, "root_exists", side_effect=PermissionError("denied")):
            result = generate_site_config(
                docs_dir=docs, hooks=GenerationHooks(on_error=errors.append),
            )
        assert result == {"nav": [], "sidebar": {}}
        assert len(errors) == 2

    def test_sorter_error(self, guide_docs: Path) -> None:
        def broken(a: object, b: object) -> int:
            raise ValueError("bad comparator")

        sidebar = generate_sidebar(docs_dir=guide_docs, max_depth=1, sidebar_item_sorter=broken)
        assert sidebar == {}

    def test_successful_scan_reports_completion(
        self, guide_docs: Path, reporter: DiagnosticReporter,
    ) -> None:
        generate_site_config(docs_dir=guide_docs, max_depth=1, reporter=reporter)
        completed = {e.kind: e.entries for e in reporter.log.query(event_type=ScanCompleted)}
        assert completed == {"nav": 1, "sidebar": 1}


# ---------------------------------------------------------------------------
# Hooks and debug output
# ---------------------------------------------------------------------------


class TestHooks:
    """GenerationHooks — start / complete / error callbacks."""

    def test_start_and_complete(self, guide_docs: Path) -> None:
        seen: list[tuple[str, object]] = []
        hooks = GenerationHooks(
            on_start=lambda config: seen.append(("start", config.max_depth)),
            on_complete=lambda result: seen.append(("complete", sorted(result))),
        )
        generate_site_config(docs_dir=guide_docs, max_depth=1, hooks=hooks)
        assert seen == [("start", 1), ("complete", ["nav", "sidebar"])]

    def test_error_called_per_failing_builder(self, docs: Path, make_tree) -> None:
        make_tree(docs, "broken/index.md")
        errors: list[Exception] = []
        generate_site_config(
            docs_dir=docs,
            max_depth=1,
            format_display_name=_fail_on("broken"),
            hooks=GenerationHooks(on_error=errors.append),
        )
        assert len(errors) == 2
        assert all(isinstance(e, PermissionError) for e in errors)

    def test_error_not_called_for_missing_root(self, tmp_path: Path) -> None:
        errors: list[Exception] = []
        generate_site_config(
            docs_dir=tmp_path / "nope", hooks=GenerationHooks(on_error=errors.append),
        )
        assert errors == []


class TestDebugOutput:
    """Diagnostics reach stderr only with debug enabled."""

    def test_silent_by_default(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        generate_site_config(docs_dir=tmp_path / "nope")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_debug_prints(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        generate_nav(docs_dir=tmp_path / "nope", debug=True)
        err = capsys.readouterr().err
        assert "[docnav] Documentation directory not found" in err
        assert "[docnav] Generated navigation structure: []" in err

    def test_debug_does_not_change_results(self, guide_docs: Path) -> None:
        quiet = generate_site_config(docs_dir=guide_docs, max_depth=1)
        loud = generate_site_config(docs_dir=guide_docs, max_depth=1, debug=True)
        assert quiet == loud

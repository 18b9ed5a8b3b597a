"""Shared test fixtures for docnav."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

type TreeFactory = Callable[..., Path]


def _make_tree(root: Path, *paths: str) -> Path:
    """Create files under *root*. Paths ending in ``/`` become empty directories."""
    root.mkdir(parents=True, exist_ok=True)
    for rel in paths:
        target = root / rel
        if rel.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"# {target.stem}\n", encoding="utf-8")
    return root


@pytest.fixture
def make_tree() -> TreeFactory:
    """Return a helper that builds a docs tree: ``make_tree(root, "guide/index.md", ...)``."""
    return _make_tree


@pytest.fixture
def docs(tmp_path: Path) -> Path:
    """Path of a not-yet-created ``docs/`` root inside tmp_path."""
    return tmp_path / "docs"


@pytest.fixture
def guide_docs(docs: Path) -> Path:
    """The two-file tree used by the end-to-end examples.

    ``docs/guide/index.md`` and ``docs/guide/setup.md``.
    """
    return _make_tree(docs, "guide/index.md", "guide/setup.md")

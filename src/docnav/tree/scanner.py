"""Tree scanner — lazy view of a documentation directory.

Directories are enumerated on demand, so a builder that fails part way
through keeps everything it produced before the failure. Reads happen in a
fixed order: list the directory, check each entry's type, check for the
overview file, then list content files.

Depth is 1-based below the docs root (the root itself is depth 0) and the
configured ``max_depth`` is a hard ceiling: a directory at ``max_depth``
never yields children.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from docnav._types import URLPath
    from docnav.config import NavConfig

# Last extension of a filename: "setup.md" -> ".md", "v1.2.md" -> ".md"
_EXTENSION = re.compile(r"\.[^/.]+$")


def strip_extension(name: str) -> str:
    """Remove the last extension from a filename."""
    return _EXTENSION.sub("", name)


@dataclass(frozen=True, slots=True)
class ContentFile:
    """A content file directly inside a directory.

    Attributes:
        name: Filename on disk (e.g., ``setup.md``).
        stem: Filename without its last extension (e.g., ``setup``).
        is_overview: True for the file that makes its directory linkable.

    """

    name: str
    stem: str
    is_overview: bool


class DirectoryEntry:
    """A directory visited during traversal.

    Args:
        config: Active configuration.
        path: Absolute filesystem path.
        depth: 0 for the docs root, 1 for its children, and so on.
        url_prefix: URL path built from the verbatim directory names,
            with leading and trailing slash (``/guide/basics/``).

    """

    __slots__ = ("_config", "depth", "path", "url_prefix")

    def __init__(
        self,
        config: NavConfig,
        path: Path,
        depth: int,
        url_prefix: URLPath,
    ) -> None:
        self._config = config
        self.path = path
        self.depth = depth
        self.url_prefix = url_prefix

    def __repr__(self) -> str:
        return f"DirectoryEntry({self.url_prefix!r}, depth={self.depth})"

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def at_max_depth(self) -> bool:
        """Whether this directory sits on the depth ceiling."""
        return self.depth >= self._config.max_depth

    def _children(self) -> list[Path]:
        return sorted(self.path.iterdir(), key=lambda p: p.name)

    def subdirectories(self) -> Iterator[DirectoryEntry]:
        """Yield non-ignored child directories in enumeration order.

        Yields nothing at the depth ceiling.
        """
        if self.at_max_depth:
            return
        for child in self._children():
            if not child.is_dir() or self._config.is_ignored_dir(child.name):
                continue
            yield DirectoryEntry(
                self._config,
                child,
                self.depth + 1,
                f"{self.url_prefix}{child.name}/",
            )

    def has_overview(self) -> bool:
        """Whether the overview file exists directly inside this directory."""
        return any(
            (self.path / f"{self._config.overview_name}{pattern}").is_file()
            for pattern in self._config.file_patterns
        )

    def content_files(self) -> list[ContentFile]:
        """Content files directly inside this directory, in enumeration order."""
        files: list[ContentFile] = []
        for child in self._children():
            if child.is_dir() or not self._config.is_content_file(child.name):
                continue
            stem = strip_extension(child.name)
            files.append(ContentFile(
                name=child.name,
                stem=stem,
                is_overview=stem == self._config.overview_name,
            ))
        return files

    def is_empty(self) -> bool:
        """True when neither this directory nor any reachable descendant has content."""
        if self.content_files():
            return False
        return all(child.is_empty() for child in self.subdirectories())


class TreeScanner:
    """Entry point for walking the configured docs root.

    A scanner holds no filesystem state; every call re-reads the disk.
    """

    __slots__ = ("_config",)

    def __init__(self, config: NavConfig) -> None:
        self._config = config

    @property
    def config(self) -> NavConfig:
        return self._config

    def root_exists(self) -> bool:
        """Whether the docs root is an existing directory."""
        return self._config.docs_path.is_dir()

    def root(self) -> DirectoryEntry:
        """The docs root as a depth-0 entry with URL prefix ``/``."""
        return DirectoryEntry(self._config, self._config.docs_path, 0, "/")

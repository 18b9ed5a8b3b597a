"""Nav builder — top navigation from the docs tree.

Walks first-level directories in enumeration order (never re-sorted):

- At ``max_depth`` a directory becomes a link to its own URL prefix if it
  holds the overview file, and is dropped otherwise.
- Above ``max_depth`` a directory becomes a group of its children's nodes,
  even when it has an overview file of its own. Branches with no content
  are skipped without descending, and groups without children are dropped.

With ``include_root_files``, loose content files at the docs root (except
the root overview, which is the site home) are appended as direct links
after the directory nodes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docnav.build.models import NavGroup, NavLink

if TYPE_CHECKING:
    from collections.abc import Iterator

    from docnav.build.models import NavNode
    from docnav.naming import Namer
    from docnav.tree.scanner import DirectoryEntry, TreeScanner


class NavBuilder:
    """Builds top-navigation nodes.

    Args:
        scanner: Tree scanner for the docs root.
        namer: Display-name policy applied to every directory and file name.

    """

    __slots__ = ("_namer", "_scanner")

    def __init__(self, scanner: TreeScanner, namer: Namer) -> None:
        self._scanner = scanner
        self._namer = namer

    def iter_nodes(self) -> Iterator[NavNode]:
        """Yield top-level nodes one by one as they are completed."""
        root = self._scanner.root()
        for entry in root.subdirectories():
            node = self._build_node(entry)
            if node is not None:
                yield node

        if self._scanner.config.include_root_files:
            yield from self._root_file_links(root)

    def build(self) -> list[NavNode]:
        return list(self.iter_nodes())

    def _build_node(self, entry: DirectoryEntry) -> NavNode | None:
        text = self._namer.format(entry.name)

        if entry.at_max_depth:
            if entry.has_overview():
                return NavLink(text=text, link=entry.url_prefix)
            return None

        if entry.is_empty():
            return None
        children = tuple(
            node
            for child in entry.subdirectories()
            if (node := self._build_node(child)) is not None
        )
        if not children:
            return None
        return NavGroup(text=text, items=children)

    def _root_file_links(self, root: DirectoryEntry) -> Iterator[NavLink]:
        for content_file in root.content_files():
            if content_file.is_overview:
                continue
            yield NavLink(
                text=self._namer.format(content_file.stem),
                link=f"/{content_file.stem}",
            )

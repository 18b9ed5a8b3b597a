"""Sidebar builder — path prefix -> sidebar groups.

Directories above ``max_depth`` are descended into without producing
entries, skipping branches with no content. Each non-ignored directory at
``max_depth`` that holds at least one content file produces one group keyed
by its URL prefix. At the deepest supported level (3) the directory must
also hold the overview file::

    "/guide/": [SidebarGroup("Guide", collapsed=True, items=(
        SidebarLink("Guide Overview", "/guide/"),
        SidebarLink("Setup", "/guide/setup"),
    ))]

With ``include_root_files``, loose root content files (except the root
overview) are listed under ``"/"`` as a flat list of links.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docnav.build.models import SidebarGroup, SidebarLink
from docnav.config import MAX_DEPTH

if TYPE_CHECKING:
    from collections.abc import Iterator

    from docnav._types import URLPath
    from docnav.naming import Namer, Orderer
    from docnav.tree.scanner import ContentFile, DirectoryEntry, TreeScanner

# Key for loose files at the docs root
ROOT_KEY = "/"

type SidebarValue = list[SidebarGroup] | list[SidebarLink]


class SidebarBuilder:
    """Builds the sidebar mapping.

    Args:
        scanner: Tree scanner for the docs root.
        namer: Display-name policy.
        orderer: Ordering policy for the links inside each entry.

    """

    __slots__ = ("_namer", "_orderer", "_scanner")

    def __init__(self, scanner: TreeScanner, namer: Namer, orderer: Orderer) -> None:
        self._scanner = scanner
        self._namer = namer
        self._orderer = orderer

    def iter_entries(self) -> Iterator[tuple[URLPath, SidebarValue]]:
        """Yield ``(prefix, value)`` pairs one by one as they are completed."""
        root = self._scanner.root()

        if self._scanner.config.include_root_files:
            root_links = [
                SidebarLink(
                    text=self._namer.format(content_file.stem),
                    link=f"/{content_file.stem}",
                )
                for content_file in root.content_files()
                if not content_file.is_overview
            ]
            if root_links:
                yield ROOT_KEY, self._orderer.sort(root_links)

        yield from self._walk(root)

    def build(self) -> dict[URLPath, SidebarValue]:
        return dict(self.iter_entries())

    def _walk(self, entry: DirectoryEntry) -> Iterator[tuple[URLPath, SidebarValue]]:
        for child in entry.subdirectories():
            if not child.at_max_depth:
                if not child.is_empty():
                    yield from self._walk(child)
                continue
            # At the deepest supported level only linkable directories get a key
            if child.depth == MAX_DEPTH and not child.has_overview():
                continue
            group = self._build_group(child)
            if group is not None:
                yield child.url_prefix, [group]

    def _build_group(self, entry: DirectoryEntry) -> SidebarGroup | None:
        files = entry.content_files()
        if not files:
            return None
        label = self._namer.format(entry.name)
        links = [self._link_for(entry, label, content_file) for content_file in files]
        return SidebarGroup(
            text=label,
            collapsed=self._scanner.config.default_expand,
            items=tuple(self._orderer.sort(links)),
        )

    def _link_for(
        self,
        entry: DirectoryEntry,
        label: str,
        content_file: ContentFile,
    ) -> SidebarLink:
        if content_file.is_overview:
            return SidebarLink(
                text=f"{label} {self._scanner.config.overview_suffix}",
                link=entry.url_prefix,
            )
        return SidebarLink(
            text=self._namer.format(content_file.stem),
            link=f"{entry.url_prefix}{content_file.stem}",
        )

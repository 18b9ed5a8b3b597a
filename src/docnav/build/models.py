"""Navigation output records.

All records are frozen dataclasses. ``to_dict()`` produces the plain
VitePress theme-config shape (``text``/``link``/``items``/``collapsed``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class NavLink:
    """A top-navigation entry pointing at a page."""

    text: str
    link: str

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "link": self.link}


@dataclass(frozen=True, slots=True)
class NavGroup:
    """A top-navigation dropdown. Never built without children."""

    text: str
    items: tuple[NavLink | NavGroup, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "items": [item.to_dict() for item in self.items]}


type NavNode = NavLink | NavGroup


@dataclass(frozen=True, slots=True)
class SidebarLink:
    """A single sidebar item."""

    text: str
    link: str

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "link": self.link}


@dataclass(frozen=True, slots=True)
class SidebarGroup:
    """A sidebar section for one directory.

    Attributes:
        text: Formatted directory name.
        collapsed: Collapse flag passed through to the theme.
        items: Sorted links to the directory's content files.

    """

    text: str
    collapsed: bool
    items: tuple[SidebarLink, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "collapsed": self.collapsed,
            "items": [item.to_dict() for item in self.items],
        }

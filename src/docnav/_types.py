"""Shared type definitions for docnav."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from docnav.build.models import SidebarLink

# Which artifact a scan produces
type ScanKind = Literal["nav", "sidebar"]

# URL path prefix (e.g., "/guide/", "/guide/setup")
type URLPath = str

# Raw directory or file name -> display label
type DisplayNameFormatter = Callable[[str], str]

# Three-way comparison of two sidebar links (negative, zero, positive)
type ItemComparator = Callable[["SidebarLink", "SidebarLink"], int]

# Plain JSON-ready navigation data
type NavData = list[dict[str, Any]]
type SidebarData = dict[str, list[dict[str, Any]]]

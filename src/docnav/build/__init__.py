"""Build layer — turn a scanned docs tree into nav and sidebar records.

Both builders share the same tree scanner and take their naming and
ordering policies as injected strategies.
"""

from docnav.build.models import NavGroup, NavLink, NavNode, SidebarGroup, SidebarLink
from docnav.build.nav import NavBuilder
from docnav.build.sidebar import SidebarBuilder

__all__ = [
    "NavBuilder",
    "NavGroup",
    "NavLink",
    "NavNode",
    "SidebarBuilder",
    "SidebarGroup",
    "SidebarLink",
]

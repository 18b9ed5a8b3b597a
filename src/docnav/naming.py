"""Naming and ordering policies.

Builders never format labels or order items themselves. They receive a
``Namer`` (raw name -> display label) and an ``Orderer`` (sidebar link
ordering) and treat both as opaque strategies::

    namer = namer_for(config)
    orderer = orderer_for(config)
    orderer.sort([SidebarLink("Setup", "/guide/setup"), ...])

Plain functions supplied through ``NavConfig.format_display_name`` and
``NavConfig.sidebar_item_sorter`` are wrapped by ``CallableNamer`` and
``CallableOrderer``.
"""

from __future__ import annotations

import locale
import re
from collections.abc import Iterable
from functools import cmp_to_key
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from docnav._types import DisplayNameFormatter, ItemComparator
    from docnav.build.models import SidebarLink
    from docnav.config import NavConfig

# CJK ideographs, kana and hangul are displayed as written
_DISPLAYABLE_SCRIPT = re.compile("[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uac00-\ud7af]")

# First word character after an ASCII word boundary
_WORD_START = re.compile(r"\b\w", re.ASCII)


class Namer(Protocol):
    """Turns a raw directory or file name into a display label."""

    def format(self, name: str) -> str: ...


class Orderer(Protocol):
    """Orders sidebar links."""

    def compare(self, a: SidebarLink, b: SidebarLink) -> int: ...

    def sort(self, items: Iterable[SidebarLink]) -> list[SidebarLink]: ...


class DefaultNamer:
    """``getting-started`` -> ``Getting Started``; CJK names pass through."""

    __slots__ = ()

    def format(self, name: str) -> str:
        if _DISPLAYABLE_SCRIPT.search(name):
            return name
        return _WORD_START.sub(lambda m: m.group(0).upper(), name.replace("-", " "))


class CallableNamer:
    """Adapts a plain ``name -> label`` function to the Namer protocol."""

    __slots__ = ("_func",)

    def __init__(self, func: DisplayNameFormatter) -> None:
        self._func = func

    def format(self, name: str) -> str:
        return self._func(name)


class _ComparatorSort:
    """Stable sort driven by ``compare``."""

    __slots__ = ()

    def compare(self, a: SidebarLink, b: SidebarLink) -> int:
        raise NotImplementedError

    def sort(self, items: Iterable[SidebarLink]) -> list[SidebarLink]:
        return sorted(items, key=cmp_to_key(self.compare))


class OverviewFirstOrderer(_ComparatorSort):
    """Overview items first, the rest by locale-aware label order.

    An item whose text contains the overview suffix sorts before one that
    does not. When both or neither contain it, labels are compared with
    ``locale.strxfrm`` on their casefolded text, falling back to the raw text
    so the order is total.

    """

    __slots__ = ("_suffix",)

    def __init__(self, overview_suffix: str = "Overview") -> None:
        self._suffix = overview_suffix

    def compare(self, a: SidebarLink, b: SidebarLink) -> int:
        a_overview = bool(self._suffix) and self._suffix in a.text
        b_overview = bool(self._suffix) and self._suffix in b.text
        if a_overview != b_overview:
            return -1 if a_overview else 1
        key_a = (locale.strxfrm(a.text.casefold()), a.text)
        key_b = (locale.strxfrm(b.text.casefold()), b.text)
        return (key_a > key_b) - (key_a < key_b)


class CallableOrderer(_ComparatorSort):
    """Adapts a plain comparator function to the Orderer protocol."""

    __slots__ = ("_func",)

    def __init__(self, func: ItemComparator) -> None:
        self._func = func

    def compare(self, a: SidebarLink, b: SidebarLink) -> int:
        return self._func(a, b)


def namer_for(config: NavConfig) -> Namer:
    """Return the Namer configured by *config*."""
    if config.format_display_name is not None:
        return CallableNamer(config.format_display_name)
    return DefaultNamer()


def orderer_for(config: NavConfig) -> Orderer:
    """Return the Orderer configured by *config*."""
    if config.sidebar_item_sorter is not None:
        return CallableOrderer(config.sidebar_item_sorter)
    return OverviewFirstOrderer(config.overview_suffix)

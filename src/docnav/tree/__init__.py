"""Tree layer — walk a documentation directory up to the depth ceiling.

Public API::

    from docnav.tree import TreeScanner

    scanner = TreeScanner(config)
    for entry in scanner.root().subdirectories():
        entry.has_overview(), entry.content_files()
"""

from docnav.tree.scanner import ContentFile, DirectoryEntry, TreeScanner, strip_extension

__all__ = [
    "ContentFile",
    "DirectoryEntry",
    "TreeScanner",
    "strip_extension",
]

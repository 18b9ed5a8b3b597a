"""Docnav configuration.

NavConfig is the central configuration object, frozen after creation.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docnav._errors import ConfigError

if TYPE_CHECKING:
    from docnav._types import DisplayNameFormatter, ItemComparator

# Probed in order when no docs directory is configured
DOCS_DIR_CANDIDATES: tuple[str, ...] = ("src/docs", "docs", ".")
DEFAULT_DOCS_DIR = "docs"

DEFAULT_IGNORE_DIRS: tuple[str, ...] = ("public", "assets", "node_modules")
DEFAULT_FILE_PATTERNS: tuple[str, ...] = (".md",)

MIN_DEPTH = 1
MAX_DEPTH = 3

# camelCase option names accepted alongside the field names
OPTION_ALIASES: dict[str, str] = {
    "docsDir": "docs_dir",
    "defaultExpand": "default_expand",
    "ignoreDirs": "ignore_dirs",
    "overviewSuffix": "overview_suffix",
    "overviewName": "overview_name",
    "formatDisplayName": "format_display_name",
    "sidebarItemSorter": "sidebar_item_sorter",
    "debug": "debug",
    "maxDepth": "max_depth",
    "includeRootFiles": "include_root_files",
    "filePatterns": "file_patterns",
}


def detect_docs_dir(cwd: Path | None = None) -> Path:
    """Return the first conventional docs directory that exists under *cwd*.

    Falls back to ``docs`` when none of the candidates is a directory.
    """
    base = cwd if cwd is not None else Path.cwd()
    for candidate in DOCS_DIR_CANDIDATES:
        if (base / candidate).is_dir():
            return Path(candidate)
    return Path(DEFAULT_DOCS_DIR)


def clamp_depth(value: int) -> int:
    """Clamp a traversal depth into the supported ``1..3`` range."""
    return max(MIN_DEPTH, min(MAX_DEPTH, int(value)))


@dataclass(frozen=True, slots=True)
class NavConfig:
    """Configuration for nav and sidebar generation.

    Attributes:
        docs_dir: Documentation root. Auto-detected from the working directory
            when omitted, and always resolved to an absolute path.
        default_expand: Value written to each sidebar group's ``collapsed`` flag.
        ignore_dirs: Directory names skipped at every level, together with
            anything starting with ``_`` or ``.``.
        overview_suffix: Appended to a directory label for its overview item.
        overview_name: File stem that marks a directory as directly linkable.
        format_display_name: Optional ``name -> label`` function.
        sidebar_item_sorter: Optional comparator for sidebar links.
        debug: Print diagnostics to stderr.
        max_depth: Traversal depth, clamped to ``1..3``.
        include_root_files: Add loose content files at the docs root.
        file_patterns: Filename suffixes recognised as content files.

    """

    docs_dir: Path | None = None
    default_expand: bool = True
    ignore_dirs: tuple[str, ...] = DEFAULT_IGNORE_DIRS
    overview_suffix: str = "Overview"
    overview_name: str = "index"
    format_display_name: DisplayNameFormatter | None = None
    sidebar_item_sorter: ItemComparator | None = None
    debug: bool = False
    max_depth: int = MAX_DEPTH
    include_root_files: bool = False
    file_patterns: tuple[str, ...] = DEFAULT_FILE_PATTERNS

    def __post_init__(self) -> None:
        docs_dir = self.docs_dir if self.docs_dir is not None else detect_docs_dir()
        docs_dir = Path(docs_dir)
        if not docs_dir.is_absolute():
            docs_dir = Path.cwd() / docs_dir
        object.__setattr__(self, "docs_dir", docs_dir)
        object.__setattr__(self, "max_depth", clamp_depth(self.max_depth))
        # Accept lists (e.g. from YAML) for the tuple fields
        object.__setattr__(self, "ignore_dirs", tuple(self.ignore_dirs))
        object.__setattr__(self, "file_patterns", tuple(self.file_patterns))

    @property
    def docs_path(self) -> Path:
        """Absolute path to the documentation root."""
        assert self.docs_dir is not None
        return self.docs_dir

    def is_ignored_dir(self, name: str) -> bool:
        """Whether a directory name is excluded from both outputs."""
        return name.startswith(("_", ".")) or name in self.ignore_dirs

    def is_content_file(self, name: str) -> bool:
        """Whether a filename matches one of the content-file patterns."""
        return any(name.endswith(pattern) for pattern in self.file_patterns)


_FIELD_NAMES: frozenset[str] = frozenset(f.name for f in fields(NavConfig))


def normalize_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase option names onto NavConfig field names.

    Raises:
        ConfigError: On keys that are neither a field nor a known alias.

    """
    result: dict[str, Any] = {}
    for key, value in options.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            msg = f"Unknown docnav option {key!r}"
            raise ConfigError(msg)
        result[name] = value
    return result


def create_config(**options: Any) -> NavConfig:
    """Construct a NavConfig from field-named *options*.

    Raises:
        ConfigError: When a value cannot be converted (e.g. ``max_depth="two"``).

    """
    try:
        return NavConfig(**options)
    except (TypeError, ValueError) as exc:
        msg = f"Invalid docnav option value: {exc}"
        raise ConfigError(msg) from exc


def build_config(config: NavConfig | None = None, **overrides: Any) -> NavConfig:
    """Return *config* (or a default NavConfig) with *overrides* applied."""
    options = normalize_options(overrides)
    if config is None:
        return create_config(**options)
    if not options:
        return config
    current = {f.name: getattr(config, f.name) for f in fields(NavConfig)}
    current.update(options)
    return create_config(**current)

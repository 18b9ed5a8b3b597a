"""Docnav — derive VitePress nav and sidebar config from a docs directory.

Scans a documentation tree and returns a top navigation list plus a sidebar
mapping from URL prefix to ordered groups of links.

Quick start::

    import docnav

    theme_config = docnav.generate_site_config(docs_dir="docs", max_depth=1)
    theme_config["nav"]       # [{"text": "Guide", "link": "/guide/"}]
    theme_config["sidebar"]   # {"/guide/": [{"text": "Guide", ...}]}

Separate generators::

    docnav.generate_nav(config)
    docnav.generate_sidebar(config)

Command line::

    docnav config docs/ --max-depth 2 --format yaml --output nav.yaml

"""

__version__ = "0.1.0"
__all__ = [
    "NavConfig",
    "__version__",
    "generate_nav",
    "generate_sidebar",
    "generate_site_config",
    "load_config",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import docnav`` fast while providing a clean top-level API.
    """
    if name == "NavConfig":
        from docnav.config import NavConfig

        return NavConfig

    if name == "load_config":
        from docnav.config_loader import load_config

        return load_config

    if name == "generate_nav":
        from docnav.app import generate_nav

        return generate_nav

    if name == "generate_sidebar":
        from docnav.app import generate_sidebar

        return generate_sidebar

    if name == "generate_site_config":
        from docnav.app import generate_site_config

        return generate_site_config

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

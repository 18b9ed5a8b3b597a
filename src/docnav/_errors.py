"""Docnav error hierarchy.

All docnav-specific errors inherit from DocnavError for easy catching.
"""


class DocnavError(Exception):
    """Base error for all docnav operations."""


class ConfigError(DocnavError):
    """Invalid or missing configuration."""


class ExportError(DocnavError):
    """Error while rendering or writing generated navigation."""

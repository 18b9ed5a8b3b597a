"""Export layer — write generated navigation to JSON or YAML files."""

from docnav.export.writer import FORMATS, WrittenFile, format_for_path, render, write_output

__all__ = ["FORMATS", "WrittenFile", "format_for_path", "render", "write_output"]

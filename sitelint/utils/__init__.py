"""
Utilities package for sitelint.

- md: Frontmatter parsing and serialization
- fs: Markdown file discovery and reading

Import commonly-used utilities directly from this package:
    from sitelint.utils import parse_frontmatter, find_markdown_files
"""

from .md import (
    format_frontmatter,
    parse_field_value,
    parse_frontmatter,
    strip_quotes,
)
from .fs import find_markdown_files, read_markdown

__all__ = [
    "format_frontmatter",
    "parse_field_value",
    "parse_frontmatter",
    "strip_quotes",
    "find_markdown_files",
    "read_markdown",
]

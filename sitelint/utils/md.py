#!/usr/bin/env python3
"""
md.py
-------------------
Frontmatter parsing for site content documents.

Content documents open with a small key-value header:

    ---
    title: "Hello, world"
    date: 2024-01-15
    tags: [python, 'static sites']
    ---

    Body text...

This is not YAML. Each header line is split on its first colon; values are
either scalars (one leading and one trailing quote character stripped) or
flat string lists in brackets. There are no nested maps, multi-line values
or escapes. Lines without a colon are ignored and a repeated key keeps its
last value.

Functions:
    parse_frontmatter: Split a document into (fields, body)
    parse_field_value: Convert one raw header value to a scalar or list
    strip_quotes: Remove one leading and one trailing quote character
    format_frontmatter: Serialize fields back into a document header
"""
from __future__ import annotations

# --- Standard library imports ---
import re
from typing import Dict, List, Optional, Tuple, Union


FieldValue = Union[str, List[str]]
Fields = Dict[str, FieldValue]

DELIMITER = "---"

# Header needs at least one character between the delimiters, and the closing
# delimiter must end with a newline.
_FRONTMATTER_RE = re.compile(r"---\n(.+?)\n---\n(.*)\Z", re.DOTALL)
_QUOTES_RE = re.compile(r"""^["']|["']\Z""")
_QUOTE_CHARS = ("'", '"')


def strip_quotes(value: str) -> str:
    """
    Remove one leading and one trailing quote character.

    Single and double quotes are both accepted at either end and are not
    required to match. Only one pass is made, so inner quotes survive.

    Examples:
        >>> strip_quotes('"hello"')
        'hello'
        >>> strip_quotes("'it''s'")
        "it''s"
        >>> strip_quotes('""quoted""')
        '"quoted"'
    """
    return _QUOTES_RE.sub("", value)


def parse_field_value(raw: str) -> FieldValue:
    """
    Convert a raw header value into a scalar or a string list.

    The value is trimmed and quote-stripped; if what remains is wrapped in
    brackets it becomes a list split on commas, each element trimmed and
    quote-stripped on its own. "[]" yields [""], not an empty list.

    Args:
        raw: Text after the first colon of a header line

    Returns:
        Scalar string or list of strings

    Examples:
        >>> parse_field_value(' "Hello" ')
        'Hello'
        >>> parse_field_value("[a, 'b', \\"c\\"]")
        ['a', 'b', 'c']
        >>> parse_field_value("[]")
        ['']
    """
    value = strip_quotes(raw.strip())
    if value.startswith("[") and value.endswith("]"):
        return [strip_quotes(item.strip()) for item in value[1:-1].split(",")]
    return value


def parse_frontmatter(content: str) -> Tuple[Optional[Fields], str]:
    """
    Split a content document into frontmatter fields and body.

    Args:
        content: Full document text

    Returns:
        Tuple of (fields, body)
        - fields: Mapping of field name to value, or None when the document
          has no well-formed "---" header. An empty mapping means a header
          was present but declared nothing.
        - body: Text after the closing delimiter line, untouched; the whole
          input when there is no header

    Examples:
        >>> parse_frontmatter("---\\ntitle: Hi\\n---\\nBody")
        ({'title': 'Hi'}, 'Body')
        >>> parse_frontmatter("No header here")
        (None, 'No header here')
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return None, content

    header, body = match.groups()
    fields: Fields = {}
    for line in header.split("\n"):
        key, sep, raw_value = line.partition(":")
        if not sep:
            continue
        fields[key.strip()] = parse_field_value(raw_value)

    return fields, body


def _format_text(value: str) -> str:
    """Quote a value when parsing would otherwise alter its ends."""
    if value and (
        value[0] in _QUOTE_CHARS
        or value[-1] in _QUOTE_CHARS
        or value != value.strip()
    ):
        return f'"{value}"'
    return value


def format_frontmatter(fields: Fields, body: str = "") -> str:
    """
    Serialize fields into a document that parses back to the same fields.

    Values that start or end with a quote character or whitespace are
    wrapped in double quotes, which parse_frontmatter strips again. List
    elements must not contain commas, and scalars must not look like a
    bracketed list; neither can occur in a mapping produced by
    parse_frontmatter.

    Args:
        fields: Mapping of field name to scalar or list
        body: Body text appended after the closing delimiter

    Returns:
        Full document text

    Examples:
        >>> format_frontmatter({"title": "Hi", "tags": ["a", "b"]}, "Body")
        '---\\ntitle: Hi\\ntags: [a, b]\\n---\\nBody'
    """
    lines = []
    for key, value in fields.items():
        if isinstance(value, list):
            text = "[" + ", ".join(_format_text(item) for item in value) + "]"
        else:
            text = _format_text(value)
        lines.append(f"{key}: {text}".rstrip())

    # An empty header still needs one character between the delimiters
    header = "\n".join(lines) or "\n"
    return f"{DELIMITER}\n{header}\n{DELIMITER}\n{body}"

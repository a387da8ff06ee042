#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem helpers for discovering and reading content documents.

Functions:
    find_markdown_files: List the markdown documents directly inside a directory
    read_markdown: Read a document as UTF-8 text

Usage:
    from sitelint.utils.fs import find_markdown_files, read_markdown

    for path in find_markdown_files(Path("content/blog")):
        text = read_markdown(path)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List

# --- Local imports ---
from sitelint.core.exceptions import ContentReadError
from sitelint.core.paths import MARKDOWN_SUFFIX


def find_markdown_files(directory: Path) -> List[Path]:
    """
    List markdown files directly inside a directory (not recursive).

    Files are sorted by name so reports are stable between runs.
    """
    if not directory.is_dir():
        return []
    return sorted(
        (p for p in directory.iterdir() if p.name.endswith(MARKDOWN_SUFFIX) and p.is_file()),
        key=lambda p: p.name,
    )


def read_markdown(file_path: Path) -> str:
    """
    Read a content document as UTF-8 text.

    Line endings are kept as stored; a CRLF document does not match the
    "---\\n" header delimiter.

    Args:
        file_path: Path to the markdown file

    Returns:
        File contents

    Raises:
        ContentReadError: If the file cannot be opened or decoded
    """
    try:
        with file_path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ContentReadError(file_path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise ContentReadError(file_path, e.strerror or str(e)) from e

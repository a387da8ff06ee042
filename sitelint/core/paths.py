#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the site layout sitelint validates.

The expected site structure:
    ROOT/
    ├── content/
    │   ├── blog/       # Blog posts (*.md)
    │   └── projects/   # Project entries (*.md)
    ├── assets/         # Images referenced from frontmatter
    └── sitelint.yaml   # Optional configuration

ROOT is the directory sitelint is run from unless --root is given. Image
paths in frontmatter are resolved against ROOT, not against the document's
own directory.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Tuple


# ----- Layout names -----
CONTENT_DIRNAME = "content"
BLOG_DIRNAME = "blog"
PROJECTS_DIRNAME = "projects"
CONFIG_FILENAME = "sitelint.yaml"

MARKDOWN_SUFFIX = ".md"


def default_root() -> Path:
    """Site root used when none is configured: the working directory."""
    return Path.cwd()


def content_paths(root: Path) -> Tuple[Path, Path, Path]:
    """
    Resolve the default content directories under a site root.

    Args:
        root: Site root directory

    Returns:
        Tuple of (content_dir, blog_dir, projects_dir)

    Examples:
        >>> content_paths(Path("/site"))
        (PosixPath('/site/content'), PosixPath('/site/content/blog'), PosixPath('/site/content/projects'))
    """
    content_dir = Path(root) / CONTENT_DIRNAME
    return content_dir, content_dir / BLOG_DIRNAME, content_dir / PROJECTS_DIRNAME


def resolve_site_path(root: Path, site_path: str) -> Path:
    """
    Resolve a path written in frontmatter against the site root.

    Leading slashes mark root-relative paths ("/assets/a.png") and are
    dropped so the result always stays under root.

    Args:
        root: Site root directory
        site_path: Path string as written in the document

    Returns:
        Filesystem path to check

    Examples:
        >>> resolve_site_path(Path("/site"), "/assets/a.png")
        PosixPath('/site/assets/a.png')
    """
    return Path(root) / site_path.lstrip("/\\")

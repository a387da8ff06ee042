"""
sitelint
========

A content linter for static sites.

Scans the markdown documents of a site (blog posts and project entries),
parses the key-value frontmatter header of each, and reports missing
required fields, malformed dates and URLs, dangling image references and
very short bodies. Meant to run as a build-time quality gate.

Main Components:
    - utils.md: Frontmatter parser (scalars and flat string lists)
    - validators.rules: Per-content-type rule sets and findings
    - validators.content: Directory walking and report formatting
    - validators.cli: The `sitelint` command
    - core: Paths, configuration, logging, exceptions

Example Usage:
    >>> from sitelint.utils.md import parse_frontmatter
    >>> from sitelint.validators.rules import validate_blog_post
    >>> fields, body = parse_frontmatter(text)
    >>> result = validate_blog_post(fields, body, "blog/hello.md", site_root)
    >>> result.exit_code
    0

Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"

from sitelint.utils.md import parse_frontmatter
from sitelint.validators.rules import (
    Finding,
    ValidationResult,
    validate_blog_post,
    validate_project,
)

__all__ = [
    "Finding",
    "ValidationResult",
    "parse_frontmatter",
    "validate_blog_post",
    "validate_project",
]

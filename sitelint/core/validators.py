#!/usr/bin/env python3
"""
validators.py
--------------------
Value checks shared by the content rules.

Provides the date and URL predicates used when evaluating frontmatter
fields. Both take the raw string as written in the document.
"""
from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlsplit

from dateutil import parser as date_parser

# Characters never allowed in a URL authority
_FORBIDDEN_AUTHORITY = re.compile(r"[\x00-\x20\x7f<>\"`{}|\\^]")


class DataValidator:
    """Centralized value validation for frontmatter fields."""

    @staticmethod
    def is_valid_date(value: Any) -> bool:
        """
        Check whether a value parses as a calendar date or date-time.

        Deliberately permissive: anything dateutil's generic parser accepts
        passes, including ambiguous forms like "03/04/2024", bare years,
        and month names.

        Args:
            value: Date string from frontmatter

        Returns:
            True if the string parses as a date

        Examples:
            >>> DataValidator.is_valid_date("2024-01-15")
            True
            >>> DataValidator.is_valid_date("January 15, 2024")
            True
            >>> DataValidator.is_valid_date("not-a-date")
            False
        """
        if not isinstance(value, str) or not value.strip():
            return False
        try:
            date_parser.parse(value)
        except (ValueError, OverflowError):
            return False
        return True

    @staticmethod
    def is_valid_url(value: Any) -> bool:
        """
        Check whether a value is an absolute URL with a network location.

        Requires a scheme and an authority ("https://example.com/x"). Relative
        paths, bare hostnames, scheme-only strings, malformed ports or IPv6
        literals, and authorities containing spaces or characters such as
        '<' or '|' are rejected.

        Args:
            value: URL string from frontmatter

        Returns:
            True if the string is an absolute URL

        Examples:
            >>> DataValidator.is_valid_url("https://github.com/user/repo")
            True
            >>> DataValidator.is_valid_url("not-a-url")
            False
            >>> DataValidator.is_valid_url("/relative/path")
            False
        """
        if not isinstance(value, str):
            return False
        try:
            parts = urlsplit(value.strip())
            # Accessing .port validates it
            parts.port
        except ValueError:
            return False
        if _FORBIDDEN_AUTHORITY.search(parts.netloc):
            return False
        return bool(parts.scheme) and bool(parts.netloc) and bool(parts.hostname)

#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for sitelint.

Rule violations never raise: they are recorded as findings. Exceptions are
reserved for the I/O and configuration layers around the rule engine.

Exception Hierarchy:
    Exception (built-in)
    ├── ConfigError - Malformed or unreadable configuration file
    └── ContentReadError - A content document could not be read

Usage:
    from sitelint.core.exceptions import ConfigError, ContentReadError

    try:
        text = read_markdown(path)
    except ContentReadError as e:
        logger.log_error(e, {"file": str(path)})
"""


class ConfigError(Exception):
    """
    Exception for configuration failures.

    Raised when the optional sitelint.yaml file cannot be loaded:
    - Invalid YAML syntax
    - Top-level document is not a mapping
    - Unknown configuration keys
    - Values of the wrong type

    Examples:
        >>> raise ConfigError("Unknown config key(s): contnet_dir")
        >>> raise ConfigError("Config value 'log_dir' must be a string")
    """

    pass


class ContentReadError(Exception):
    """
    Exception for content documents that cannot be read.

    Raised when a markdown file returned by the directory listing fails to
    open or decode (permissions, encoding, file vanished in between). The
    collector turns it into a per-file error finding and moves on.

    Attributes:
        path: Path of the unreadable document

    Examples:
        >>> raise ContentReadError(Path("blog/post.md"), "Permission denied")
    """

    def __init__(self, path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read file: {reason}")

#!/usr/bin/env python3
"""
config.py
---------
Run configuration for sitelint.

Defaults come from the standard site layout (see paths.py). An optional
sitelint.yaml at the site root may relocate the content directories or
turn on file logging:

    content_dir: src/content
    blog_dir: src/content/posts
    projects_dir: src/content/work
    log_dir: .logs

All paths are resolved relative to the site root. Command-line options
take precedence over the file.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from sitelint.core.exceptions import ConfigError
from sitelint.core.paths import (
    BLOG_DIRNAME,
    CONFIG_FILENAME,
    PROJECTS_DIRNAME,
    content_paths,
    default_root,
)


CONFIG_KEYS = ("content_dir", "blog_dir", "projects_dir", "log_dir")


@dataclass
class SiteLintConfig:
    """
    Resolved settings for one validation run.

    Attributes:
        root: Site root; image paths resolve against it
        content_dir: Directory holding the content sections
        blog_dir: Directory of blog post documents
        projects_dir: Directory of project documents
        log_dir: Directory for log files, or None to disable file logging
    """

    root: Path
    content_dir: Path
    blog_dir: Path
    projects_dir: Path
    log_dir: Optional[Path] = None

    @classmethod
    def for_root(cls, root: Path) -> "SiteLintConfig":
        """Build the default configuration for a site root."""
        root = Path(root)
        content_dir, blog_dir, projects_dir = content_paths(root)
        return cls(
            root=root,
            content_dir=content_dir,
            blog_dir=blog_dir,
            projects_dir=projects_dir,
        )


def _read_config_file(config_path: Path) -> Dict[str, Any]:
    """
    Load and check the raw mapping from a config file.

    Raises:
        ConfigError: If the file is unreadable, not YAML, or not a mapping
            of known keys to strings
    """
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    unknown = sorted(str(k) for k in data if k not in CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    for key, value in data.items():
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"Config value '{key}' must be a string")

    return data


def load_config(
    root: Optional[Path] = None,
    config_path: Optional[Path] = None,
    log_dir: Optional[Path] = None,
) -> SiteLintConfig:
    """
    Resolve the configuration for a run.

    Args:
        root: Site root (default: current directory)
        config_path: Explicit config file; when omitted, <root>/sitelint.yaml
            is used if it exists
        log_dir: Log directory override from the command line

    Returns:
        Resolved SiteLintConfig

    Raises:
        ConfigError: If the config file is malformed
    """
    root = Path(root) if root is not None else default_root()
    config = SiteLintConfig.for_root(root)

    if config_path is None and (root / CONFIG_FILENAME).is_file():
        config_path = root / CONFIG_FILENAME

    if config_path is not None:
        data = _read_config_file(Path(config_path))

        if data.get("content_dir"):
            config.content_dir = root / data["content_dir"]
            # Sections follow a relocated content dir unless set explicitly
            config.blog_dir = config.content_dir / BLOG_DIRNAME
            config.projects_dir = config.content_dir / PROJECTS_DIRNAME
        if data.get("blog_dir"):
            config.blog_dir = root / data["blog_dir"]
        if data.get("projects_dir"):
            config.projects_dir = root / data["projects_dir"]
        if data.get("log_dir"):
            config.log_dir = root / data["log_dir"]

    if log_dir is not None:
        config.log_dir = Path(log_dir)

    return config

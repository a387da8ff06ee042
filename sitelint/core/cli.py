#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers for sitelint commands.

Functions:
    setup_logger: Initialize SiteLintLogger for CLI operations

Usage:
    from sitelint.core.cli import setup_logger

    logger = setup_logger(log_dir, "validator")
    safe_logger(logger).log_operation("validate_start", {"root": "."})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Local imports ---
from sitelint.core.logging_manager import SiteLintLogger


def setup_logger(log_dir: Optional[Path], component_name: str) -> Optional[SiteLintLogger]:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a SiteLintLogger for the component. Without a log directory file logging
    stays off and None is returned, for use with safe_logger().

    Args:
        log_dir: Base log directory, or None
        component_name: Component identifier for logging (e.g., 'validator')

    Returns:
        Configured SiteLintLogger instance, or None

    Examples:
        >>> logger = setup_logger(Path("logs"), "validator")
        >>> logger.log_operation("validate_start", {"root": "."})
    """
    if log_dir is None:
        return None
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return SiteLintLogger(operations_log_dir, component_name=component_name)

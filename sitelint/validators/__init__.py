#!/usr/bin/env python3
"""
validators
----------
Content validation for sitelint.

Architecture:
    - rules.py: Finding/ValidationResult, the Rule type, and the ordered
      rule sets for blog posts and projects
    - content.py: Walks content sections and formats the console report
    - cli.py: The `sitelint` command

Usage:
    # Through CLI
    sitelint

    # Direct import for programmatic use
    from sitelint.validators.rules import validate_project
    from sitelint.validators.content import ContentValidator
"""

__all__ = [
    "rules",
    "content",
]

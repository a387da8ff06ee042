#!/usr/bin/env python3
"""
cli.py
------
Command-line entry point for sitelint.

Validates the blog posts and projects of a static site and exits with
status 1 if any error was found. Warnings are reported but do not fail
the run.

Usage:
    sitelint                       # validate ./content
    sitelint --root path/to/site   # validate another site
    sitelint --log-dir logs -v     # keep log files, show tracebacks
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional

# --- Third party imports ---
import click

# --- Local imports ---
from sitelint.core.cli import setup_logger
from sitelint.core.cli_options import (
    config_option,
    log_dir_option,
    root_option,
    verbose_option,
)
from sitelint.core.config import load_config
from sitelint.core.exceptions import ConfigError
from sitelint.core.logging_manager import handle_cli_error, safe_logger
from sitelint.validators.content import ContentValidator, format_report
from sitelint.validators.rules import ValidationResult


@click.command()
@root_option
@config_option
@log_dir_option
@verbose_option
@click.pass_context
def cli(
    ctx: click.Context,
    root: Optional[str],
    config_path: Optional[str],
    log_dir: Optional[str],
    verbose: bool,
) -> None:
    """
    Validate site content.

    Checks every markdown file in content/blog and content/projects for
    frontmatter problems (missing fields, bad dates and URLs, missing
    images) and very short bodies.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    try:
        config = load_config(
            root=Path(root) if root else None,
            config_path=Path(config_path) if config_path else None,
            log_dir=Path(log_dir) if log_dir else None,
        )
        logger = setup_logger(config.log_dir, "validator")
    except (ConfigError, OSError) as e:
        handle_cli_error(ctx, e, "load_config", {"root": root})

    ctx.obj["logger"] = logger
    safe_logger(logger).log_operation("validate_start", {"root": config.root})

    validator = ContentValidator(config, logger)
    result = ValidationResult()

    click.echo("🔍 Starting content validation...\n")

    try:
        for index, section in enumerate(validator.sections):
            if index:
                click.echo("")
            click.echo(section.progress_message)
            report = validator.validate_section(section)
            if report.summary:
                click.echo(report.summary)
            result.merge(report.result)
    except Exception as e:
        handle_cli_error(ctx, e, "validate_content", {"root": config.root})

    click.echo(format_report(result))

    safe_logger(logger).log_operation(
        "validate_complete",
        {"errors": result.total_errors, "warnings": result.total_warnings},
    )
    ctx.exit(result.exit_code)


if __name__ == "__main__":
    cli()

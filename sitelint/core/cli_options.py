#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for the sitelint command.

Every option is optional: running `sitelint` with no arguments validates
the content under the current directory.

Usage:
    from sitelint.core.cli_options import root_option, verbose_option

    @click.command()
    @root_option
    @verbose_option
    def cli(root, verbose):
        pass
"""
import click


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Show tracebacks for unexpected failures"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory for log files (logging to file is off when omitted)"
)


# ═══════════════════════════════════════════════════════════════════════════
# PATH OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

root_option = click.option(
    "--root",
    type=click.Path(file_okay=False),
    default=None,
    help="Site root containing content/ (default: current directory)"
)

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Configuration file (default: <root>/sitelint.yaml if present)"
)

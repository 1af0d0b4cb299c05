"""Command-line entry point for arc-index."""

from __future__ import annotations

import logging
import sys

import click

from .commands import rebuild as rebuild_cmd
from .commands import stats as stats_cmd
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH
from .core.database import DatabaseManager
from .core.output import OUTPUT_CHOICES, OutputFormat

# Logging writes to stderr; stdout carries command output only
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def _output_option(func):
    return click.option(
        "--output",
        "-o",
        type=click.Choice(OUTPUT_CHOICES),
        default=OutputFormat.TABLE.value,
        show_default=True,
        help="Output format",
    )(func)


def _quiet_logging(ctx: click.Context, output: str) -> None:
    if output == OutputFormat.QUIET.value and not ctx.obj.get("verbose"):
        logging.getLogger().setLevel(logging.WARNING)


@click.group()
@click.option(
    "--config",
    default=str(DEFAULT_CONFIG_PATH),
    show_default=True,
    help="Path to config file (defaults to data_dir/config/config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config: str, verbose: bool) -> None:
    """Build and manage research indexes from database contents.

    Arc-index generates index files (like _INDEX.md) from your research
    database, organizing papers, blog posts, and other items by type and date.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


@cli.command("rebuild")
@click.option(
    "--out-file",
    "-f",
    default=None,
    help="Path for the generated index file (default: {research-root}/_INDEX.md)",
)
@_output_option
@click.pass_context
def rebuild(ctx: click.Context, out_file: str | None, output: str) -> None:
    """Rebuild the research index from database.

    The index file contains all research items organized by type (Papers,
    Blog Posts) in reverse chronological order.

    \b
    Examples:
      # Rebuild the default research index
      arc-index rebuild

    \b
      # Write the index to a custom path
      arc-index rebuild --out-file docs/research/_INDEX.md

    \b
      # Report the result as JSON
      arc-index rebuild --output json
    """
    _quiet_logging(ctx, output)
    try:
        rebuild_cmd.run(ctx.obj["config_path"], out_file, output)
    except Exception as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@cli.command("stats")
@_output_option
@click.pass_context
def stats(ctx: click.Context, output: str) -> None:
    """Show index statistics.

    Display counts of indexed items by type. Counts that cannot be queried
    are reported as 0.

    \b
    Examples:
      # Show stats in table format
      arc-index stats

    \b
      # Output as JSON
      arc-index stats --output json
    """
    _quiet_logging(ctx, output)
    try:
        stats_cmd.run(ctx.obj["config_path"], output)
    except Exception as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@cli.command("status")
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration and database status."""
    try:
        config_manager = ConfigManager(ctx.obj["config_path"])
        click.echo(f"Config file: {config_manager.config_path}")

        if config_manager.validate_config():
            click.echo("Configuration is valid")
        else:
            click.echo("Configuration validation failed")
            return

        db_manager = DatabaseManager(config_manager.load_config())
        click.echo(f"Research root: {config_manager.get_research_root()}")
        click.echo(f"Index file: {config_manager.get_default_index_path()}")
        state = "found" if db_manager.exists() else "missing"
        click.echo(f"Database: {db_manager.db_path} ({state})")

    except Exception as exc:  # pragma: no cover - click echoes the message
        click.echo(f"Error checking status: {exc}", err=True)


def main() -> None:  # pragma: no cover - console script
    cli()


if __name__ == "__main__":  # pragma: no cover - script entry
    main()

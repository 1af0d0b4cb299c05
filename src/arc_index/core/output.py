"""Output format selection shared by the CLI commands.

Each format maps to one emitter; ``table`` prints the command's human lines,
``json``/``yaml`` encode the structured result, ``quiet`` prints nothing.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Callable, Dict, Iterable

import click
import yaml


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"
    QUIET = "quiet"


OUTPUT_CHOICES = [fmt.value for fmt in OutputFormat]


def resolve_output(output: str | OutputFormat) -> OutputFormat:
    """Return the ``OutputFormat`` for *output* or raise ValueError."""
    try:
        return OutputFormat(output)
    except ValueError:
        raise ValueError(
            f"unsupported output format '{output}' (expected one of: {', '.join(OUTPUT_CHOICES)})"
        ) from None


def _emit_table(result: Dict[str, Any], table_lines: Iterable[str]) -> None:
    for line in table_lines:
        click.echo(line)


def _emit_json(result: Dict[str, Any], table_lines: Iterable[str]) -> None:
    click.echo(json.dumps(result, indent=2))


def _emit_yaml(result: Dict[str, Any], table_lines: Iterable[str]) -> None:
    click.echo(yaml.safe_dump(result, sort_keys=False, allow_unicode=True), nl=False)


def _emit_quiet(result: Dict[str, Any], table_lines: Iterable[str]) -> None:
    return None


_EMITTERS: Dict[OutputFormat, Callable[[Dict[str, Any], Iterable[str]], None]] = {
    OutputFormat.TABLE: _emit_table,
    OutputFormat.JSON: _emit_json,
    OutputFormat.YAML: _emit_yaml,
    OutputFormat.QUIET: _emit_quiet,
}


def emit(result: Dict[str, Any], output: str | OutputFormat, table_lines: Iterable[str] = ()) -> None:
    """Write *result* to stdout in the requested format."""
    _EMITTERS[resolve_output(output)](result, table_lines)


__all__ = ["OutputFormat", "OUTPUT_CHOICES", "resolve_output", "emit"]

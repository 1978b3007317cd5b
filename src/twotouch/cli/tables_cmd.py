"""CLI handlers for the tables and validate subcommands."""

from __future__ import annotations

import typer

from twotouch.errors import ConfigurationError
from twotouch.tables.loader import load_table
from twotouch.utils.logging_setup import setup_logging

from ._common import EXIT_CONFIGURATION, build_converter


def run_tables(config_path: str | None) -> None:
    converter = build_converter(config_path)
    for table in converter.tables:
        typer.echo(
            f"{table.priority:>4}  {table.name:<20} {len(table):>4} units  "
            f"max code length {table.max_code_length}"
        )


def run_validate(paths: list[str]) -> None:
    setup_logging("WARNING")
    failed = 0
    for path in paths:
        try:
            table = load_table(path)
        except ConfigurationError as exc:
            failed += 1
            typer.echo(f"{path}: {len(exc.problems)} problem(s)", err=True)
            for problem in exc.problems:
                typer.echo(f"  - {problem}", err=True)
            continue
        except OSError as exc:
            failed += 1
            typer.echo(f"{path}: {exc}", err=True)
            continue
        typer.echo(f"{path}: ok ({table.name}, {len(table)} units)")
    if failed:
        raise typer.Exit(code=EXIT_CONFIGURATION)

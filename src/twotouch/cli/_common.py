"""Helpers shared by the CLI handlers."""

from __future__ import annotations

from typing import NoReturn

import typer
from pydantic import ValidationError

from twotouch.config.loader import load_config
from twotouch.converter import Converter
from twotouch.errors import ConfigurationError, TwoTouchError
from twotouch.utils.logging_setup import setup_logging

EXIT_CONVERSION = 1
EXIT_CONFIGURATION = 2


def build_converter(config_path: str | None) -> Converter:
    try:
        cfg = load_config(config_path)
    except (OSError, ValidationError) as exc:
        typer.echo(f"error: cannot load config {config_path}: {exc}", err=True)
        raise typer.Exit(code=EXIT_CONFIGURATION) from exc
    setup_logging(cfg.log_level)
    try:
        return Converter.from_config(cfg)
    except ConfigurationError as exc:
        fail(exc)


def fail(exc: TwoTouchError) -> NoReturn:
    """Report an error on stderr and exit with the matching status."""
    typer.echo(f"error: {exc}", err=True)
    if isinstance(exc, ConfigurationError):
        for problem in exc.problems:
            typer.echo(f"  - {problem}", err=True)
        raise typer.Exit(code=EXIT_CONFIGURATION)
    raise typer.Exit(code=EXIT_CONVERSION)

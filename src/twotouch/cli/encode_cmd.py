"""CLI handler for the encode subcommand."""

from __future__ import annotations

import orjson
import typer

from twotouch.errors import ConversionError

from ._common import build_converter, fail


def run_encode(text: str, config_path: str | None, as_json: bool) -> None:
    converter = build_converter(config_path)
    try:
        candidates = converter.encode(text)
    except ConversionError as exc:
        fail(exc)
    if as_json:
        typer.echo(orjson.dumps(candidates).decode())
        return
    for candidate in candidates:
        typer.echo(candidate)

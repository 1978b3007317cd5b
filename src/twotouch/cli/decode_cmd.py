"""CLI handler for the decode subcommand."""

from __future__ import annotations

import orjson
import typer

from twotouch.errors import ConversionError, UndecodableError

from ._common import build_converter, fail


def run_decode(digits: str, config_path: str | None, show_all: bool, as_json: bool) -> None:
    converter = build_converter(config_path)
    try:
        if show_all:
            candidates = converter.decode_candidates(digits)
            if not candidates:
                raise UndecodableError(digits)
        else:
            text = converter.decode(digits)
    except ConversionError as exc:
        fail(exc)

    if show_all:
        if as_json:
            payload = [{"table": c.table, "text": c.text} for c in candidates]
            typer.echo(orjson.dumps(payload).decode())
        else:
            for c in candidates:
                typer.echo(f"{c.table}\t{c.text}")
    elif as_json:
        typer.echo(orjson.dumps(text).decode())
    else:
        typer.echo(text)

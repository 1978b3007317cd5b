"""Main Typer application with 4 subcommands."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="twotouch",
    help="Convert between Japanese text and pager two-touch digit codes.",
    no_args_is_help=True,
)


@app.command()
def encode(
    text: str = typer.Argument(..., help="Text to encode"),
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    as_json: bool = typer.Option(False, "--json", help="Print candidates as a JSON array"),
) -> None:
    """Encode text into one digit string per table that can represent it."""
    from .encode_cmd import run_encode

    run_encode(text, config, as_json)


@app.command()
def decode(
    digits: str = typer.Argument(..., help="Digit string to decode"),
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    show_all: bool = typer.Option(
        False, "--all", "-a", help="Show every table's decoding, not just the first"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Decode a digit string with the first table that accepts all of it."""
    from .decode_cmd import run_decode

    run_decode(digits, config, show_all, as_json)


@app.command()
def tables(
    config: str = typer.Option(None, "--config", "-c", help="Path to config YAML"),
) -> None:
    """List the loaded code tables in priority order."""
    from .tables_cmd import run_tables

    run_tables(config)


@app.command()
def validate(
    paths: list[str] = typer.Argument(..., help="Table files (.yaml or .json)"),
) -> None:
    """Check table files for duplicate or conflicting entries."""
    from .tables_cmd import run_validate

    run_validate(paths)


if __name__ == "__main__":
    app()

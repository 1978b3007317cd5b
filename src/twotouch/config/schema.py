"""Pydantic v2 configuration models for the converter and CLI."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class NormalisationConfig(BaseModel):
    unicode_form: str = "NFC"
    fold_katakana: bool = True
    fold_fullwidth: bool = True
    strip_whitespace: bool = False


class TableSource(BaseModel):
    """One table to load: a bundled table by name or a data file."""

    builtin: str | None = None
    path: Path | None = None
    priority: int | None = None

    @model_validator(mode="after")
    def _exactly_one_source(self) -> TableSource:
        if (self.builtin is None) == (self.path is None):
            raise ValueError("table source needs exactly one of 'builtin' or 'path'")
        if self.builtin is not None:
            from twotouch.tables.loader import BUILTIN_TABLES

            if self.builtin not in BUILTIN_TABLES:
                raise ValueError(
                    f"unknown builtin table {self.builtin!r}; "
                    f"choose from {', '.join(BUILTIN_TABLES)}"
                )
        return self


def _default_tables() -> list[TableSource]:
    from twotouch.tables.loader import BUILTIN_TABLES

    return [TableSource(builtin=name) for name in BUILTIN_TABLES]


class ConverterConfig(BaseModel):
    """Top-level configuration."""

    tables: list[TableSource] = Field(default_factory=_default_tables)
    normalisation: NormalisationConfig = Field(default_factory=NormalisationConfig)
    log_level: str = "INFO"

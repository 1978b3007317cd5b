"""Load and validate converter configuration from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml

from .schema import ConverterConfig


def load_config(path: Path | str | None = None) -> ConverterConfig:
    """Read a YAML file and return a validated ConverterConfig.

    Relative table paths are resolved against the config file's directory.
    Without a path the defaults (all bundled tables) are returned.
    """
    if path is None:
        return ConverterConfig()
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    cfg = ConverterConfig.model_validate(raw)
    for source in cfg.tables:
        if source.path is not None and not source.path.is_absolute():
            source.path = path.parent / source.path
    return cfg

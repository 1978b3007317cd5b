"""Shared test fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from twotouch.converter import Converter
from twotouch.tables.loader import load_table
from twotouch.tables.models import CodeTable

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def config_path() -> Path:
    return FIXTURES_DIR / "config_test.yaml"


@pytest.fixture
def quiet_config_path() -> Path:
    return FIXTURES_DIR / "config_quiet.yaml"


@pytest.fixture
def mini_table() -> CodeTable:
    return load_table(FIXTURES_DIR / "mini_table.yaml")


@pytest.fixture(scope="session")
def converter() -> Converter:
    return Converter.default()


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("twotouch")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)

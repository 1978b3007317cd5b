"""Pager two-touch input codec: Japanese text <-> digit codes."""

from twotouch.converter import Converter, DecodeCandidate, decode, encode
from twotouch.errors import (
    ConfigurationError,
    ConversionError,
    ErrorKind,
    InvalidInputError,
    TwoTouchError,
    UndecodableError,
    UnencodableError,
)
from twotouch.tables.models import CodeTable

__all__ = [
    "CodeTable",
    "ConfigurationError",
    "ConversionError",
    "Converter",
    "DecodeCandidate",
    "ErrorKind",
    "InvalidInputError",
    "TwoTouchError",
    "UndecodableError",
    "UnencodableError",
    "decode",
    "encode",
]

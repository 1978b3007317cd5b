"""Unicode normalisation of text before it is encoded."""

from __future__ import annotations

import re
import unicodedata

from twotouch.config.schema import NormalisationConfig

# Katakana block that has a hiragana counterpart 0x60 code points below
_KATAKANA_START = 0x30A1
_KATAKANA_END = 0x30F6
_KANA_OFFSET = 0x60

# Fullwidth forms of printable ASCII
_FULLWIDTH_START = 0xFF01
_FULLWIDTH_END = 0xFF5E
_FULLWIDTH_OFFSET = 0xFEE0

_IDEOGRAPHIC_SPACE = "\u3000"

_MULTI_WS_RE = re.compile(r"\s+")


def normalize_unicode(text: str, form: str = "NFC") -> str:
    """Apply Unicode normalisation (NFC by default).

    NFKC also folds fullwidth forms but turns the spacing voiced mark
    into a space plus a combining mark, which no table accepts.
    """
    return unicodedata.normalize(form, text)


def katakana_to_hiragana(text: str) -> str:
    return "".join(
        chr(ord(ch) - _KANA_OFFSET)
        if _KATAKANA_START <= ord(ch) <= _KATAKANA_END
        else ch
        for ch in text
    )


def fullwidth_to_ascii(text: str) -> str:
    """Map fullwidth ASCII variants (Ａ, ？, １, ...) and the ideographic space."""
    out = []
    for ch in text:
        cp = ord(ch)
        if _FULLWIDTH_START <= cp <= _FULLWIDTH_END:
            out.append(chr(cp - _FULLWIDTH_OFFSET))
        elif ch == _IDEOGRAPHIC_SPACE:
            out.append(" ")
        else:
            out.append(ch)
    return "".join(out)


def clean_whitespace(text: str) -> str:
    """Collapse multiple whitespace to single space, strip edges."""
    return _MULTI_WS_RE.sub(" ", text).strip()


def normalise_text(text: str, config: NormalisationConfig | None = None) -> str:
    """Apply all configured cleanup steps in sequence."""
    config = config or NormalisationConfig()
    text = normalize_unicode(text, config.unicode_form)
    if config.fold_fullwidth:
        text = fullwidth_to_ascii(text)
    if config.fold_katakana:
        text = katakana_to_hiragana(text)
    if config.strip_whitespace:
        text = clean_whitespace(text)
    return text

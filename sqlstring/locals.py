"""Locals"""

# This module must not import anything from this package except errors.

from typing import Literal

from .errors import QuoteStyleError

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'

QuoteChar = Literal["'"] | Literal['"']

_QUOTES = (SINGLE_QUOTE, DOUBLE_QUOTE)


def resolve_quote(double_quotes: bool | str = False) -> QuoteChar:
    """Resolve quote flag (or the quote character itself) to a quote character"""
    if isinstance(double_quotes, bool):
        return DOUBLE_QUOTE if double_quotes else SINGLE_QUOTE
    if double_quotes not in _QUOTES:
        raise QuoteStyleError(f"Unsupported quote character: {double_quotes!r}")
    return double_quotes  # type: ignore

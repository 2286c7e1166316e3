"""Errors"""


class BuilderError(Exception):
    """Base error of every builder"""


class NegativeValueError(BuilderError, ValueError):
    """An unsigned value (limit, offset, uint) is negative."""


class QuoteStyleError(BuilderError, ValueError):
    """Quote character is neither single nor double quote"""

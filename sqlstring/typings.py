"""Typing Extensions"""

from typing import Any, Iterable, NamedTuple, TypeAlias

Strings: TypeAlias = Iterable[str]


class DefaultValue(NamedTuple):
    """Default value of a column. ``value`` is rendered with ``str()``"""

    value: Any
    use_quotes: bool = False


class ForeignKey(NamedTuple):
    """Foreign key constraint of a table"""

    columns: tuple[str, ...]
    references: tuple[str, ...]
    table: str


__all__ = ("Strings", "DefaultValue", "ForeignKey")

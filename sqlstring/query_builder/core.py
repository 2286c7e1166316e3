"""Core builder"""

from copy import deepcopy
from typing import Self

from .._debug import trace_render
from ..errors import NegativeValueError
from ..fragment import SQLString
from ..locals import QuoteChar


def check_unsigned(name: str, value: int) -> int:
    """Check that value is a non-negative integer"""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Expected {name} to be integer")
    if value < 0:
        raise NegativeValueError(f"Expected {name} to be unsigned, got {value}")
    return value


class BaseBuilder:
    """Base statement builder.

    Subclasses keep their accumulated state in plain attributes, set up by
    :meth:`_clear`, and write the statement into the scratch fragment in
    :meth:`_build`. The scratch fragment is reset before every render."""

    def __init__(self, double_quotes: bool | str = False) -> None:
        self._sql = SQLString(double_quotes)
        self._clear()

    @property
    def quote(self) -> QuoteChar:
        """Quote character of this builder"""
        return self._sql.quote

    @property
    def double_quotes(self):
        """Is double quote in use?"""
        return self._sql.double_quotes

    def _clear(self):
        """Set accumulated state to its empty value"""

    def _build(self, sql: SQLString):
        raise NotImplementedError

    def render(self) -> str:
        """Render current state as SQL"""
        self._sql.reset()
        self._build(self._sql)
        return trace_render(self, self._sql.render())

    def reset(self) -> Self:
        """Drop accumulated state. Quote style and construction flags are kept."""
        self._sql.reset()
        self._clear()
        return self

    def copy(self) -> Self:
        """Return an independent copy of this builder"""
        return deepcopy(self)

    def _adopt(self, builder: "BaseBuilder"):
        """Copy a nested builder, taking over this builder's quote style"""
        owned = builder.copy()
        owned._sql = SQLString(self.quote)  # pylint: disable=protected-access
        return owned

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.render()!r}>"

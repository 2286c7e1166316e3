"""SQL fragment builder"""

from typing import Self

from .errors import NegativeValueError
from .locals import DOUBLE_QUOTE, QuoteChar, resolve_quote
from .typings import Strings


class SQLString:
    """Raw SQL text accumulator. Every ``add_*`` method appends to the buffer,
    the buffer is only ever cleared by :meth:`reset`.

    When ``add_comma`` is set, a comma directly follows the appended content."""

    def __init__(self, double_quotes: bool | str = False) -> None:
        self._quote = resolve_quote(double_quotes)
        self._buffer: list[str] = []

    @property
    def quote(self) -> QuoteChar:
        """Quote character used by quoted appends"""
        return self._quote

    @property
    def double_quotes(self):
        """Is double quote in use?"""
        return self._quote == DOUBLE_QUOTE

    def _write(self, text: str, add_comma: bool) -> Self:
        self._buffer.append(text)
        if add_comma:
            self._buffer.append(",")
        return self

    def quoted(self, text: str) -> str:
        """Return text wrapped with current quote character"""
        return f"{self._quote}{text}{self._quote}"

    def add_string(self, text: str, add_comma: bool = False):
        """Add raw string"""
        return self._write(text, add_comma)

    def add_string_with_quotes(self, text: str, add_comma: bool = False):
        """Add string wrapped in quotes"""
        return self._write(self.quoted(text), add_comma)

    def add_strings(self, texts: Strings, sep: str = ", ", add_comma: bool = False):
        """Add strings joined by sep"""
        return self._write(sep.join(texts), add_comma)

    def add_strings_with_quotes(
        self, texts: Strings, sep: str = ", ", add_comma: bool = False
    ):
        """Add strings, each wrapped in quotes and joined by sep.

        An empty sequence renders as a bare pair of quotes."""
        quote = self._quote
        return self._write(
            f"{quote}{(quote + sep + quote).join(texts)}{quote}", add_comma
        )

    def add_strings_with_parens(
        self,
        texts: Strings,
        sep: str = ", ",
        add_comma: bool = False,
        quoted: bool = False,
    ):
        """Add joined strings (optionally quoted) wrapped in parentheses"""
        self._buffer.append("(")
        if quoted:
            self.add_strings_with_quotes(texts, sep)
        else:
            self.add_strings(texts, sep)
        return self._write(")", add_comma)

    def add_string_with_parens(self, text: str, add_comma: bool = False):
        """Add a single raw string wrapped in parentheses"""
        return self._write(f"({text})", add_comma)

    def add_int(self, value: int, add_comma: bool = False):
        """Add base 10 integer"""
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Expected integer, got {type(value).__name__}")
        return self._write(str(value), add_comma)

    def add_uint(self, value: int, add_comma: bool = False):
        """Add base 10 unsigned integer"""
        if isinstance(value, int) and value < 0:
            raise NegativeValueError(f"Expected unsigned integer, got {value}")
        return self.add_int(value, add_comma)

    def reset(self):
        """Clear the buffer"""
        self._buffer.clear()
        return self

    def render(self) -> str:
        """Return accumulated SQL text"""
        return "".join(self._buffer)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return sum(map(len, self._buffer))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.render()!r}>"

"""Select and compound select builders"""

from typing import Self

from .core import BaseBuilder, check_unsigned
from ..fragment import SQLString
from ..options import Junction, SelectOption


class Select(BaseBuilder):  # pylint: disable=too-many-instance-attributes
    """SELECT statement.

    The WHERE clause is always written, even when no predicate was given::

        >>> Select().add_column("c1").add_table("t2").render()
        'SELECT c1 FROM t2 WHERE '

    Always pass a predicate (``"1 = 1"`` when there is nothing to filter)."""

    def _clear(self):
        self._option = SelectOption.NONE
        self._columns: list[str] = []
        self._tables: list[str] = []
        self._where = ""
        self._group_by: list[str] = []
        self._order_by: list[str] = []
        self._limit = 0
        self._offset = 0

    def add_column(self, *columns: str) -> Self:
        """Add columns, duplicates are kept"""
        self._columns.extend(columns)
        return self

    def add_table(self, *tables: str) -> Self:
        """Add source tables"""
        self._tables.extend(tables)
        return self

    def where(self, predicate: str) -> Self:
        """Set predicate, replaces any previous one"""
        self._where = predicate
        return self

    def group_by(self, *keys: str) -> Self:
        """Add GROUP BY keys"""
        self._group_by.extend(keys)
        return self

    def order_by(self, *keys: str) -> Self:
        """Add ORDER BY keys (e.g. ``"c1 DESC"``)"""
        self._order_by.extend(keys)
        return self

    def limit(self, limit: int, offset: int = 0) -> Self:
        """Set LIMIT and OFFSET. Offset is only written when limit is not 0."""
        self._limit = check_unsigned("limit", limit)
        self._offset = check_unsigned("offset", offset)
        return self

    def option(self, option: SelectOption) -> Self:
        """Set ALL/DISTINCT/UNIQUE modifier"""
        self._option = SelectOption(option)
        return self

    @property
    def columns(self):
        """Selected columns"""
        return tuple(self._columns)

    @property
    def tables(self):
        """Source tables"""
        return tuple(self._tables)

    @property
    def predicate(self):
        """Current predicate"""
        return self._where

    def _build(self, sql: SQLString):
        sql.add_string("SELECT ")
        sql.add_string(self._option)
        sql.add_strings(self._columns)
        sql.add_string(" FROM ")
        sql.add_strings(self._tables)
        sql.add_string(" WHERE ")
        sql.add_string(self._where)
        if self._group_by:
            sql.add_string(" GROUP BY ")
            sql.add_strings(self._group_by)
        if self._order_by:
            sql.add_string(" ORDER BY ")
            sql.add_strings(self._order_by)
        if self._limit > 0:
            sql.add_string(" LIMIT ")
            sql.add_uint(self._limit)
            if self._offset > 0:
                sql.add_string(" OFFSET ")
                sql.add_uint(self._offset)


class CompoundSelect(BaseBuilder):
    """Two selects joined by UNION/UNION ALL/INTERSECT/EXCEPT.

    Both selects are owned by this builder: :meth:`set_left` and
    :meth:`set_right` store copies using this builder's quote style.
    Column counts are not checked."""

    def __init__(
        self,
        left: Select | None = None,
        right: Select | None = None,
        junction: Junction = Junction.UNION,
        double_quotes: bool | str = False,
    ) -> None:
        self._default_junction = Junction(junction)
        super().__init__(double_quotes)
        if left is not None:
            self.set_left(left)
        if right is not None:
            self.set_right(right)

    def _clear(self):
        self._left = Select(self.quote)
        self._right = Select(self.quote)
        self._junction = self._default_junction

    def set_left(self, select: Select) -> Self:
        """Set left hand select"""
        self._left = self._adopt(select)
        return self

    def set_right(self, select: Select) -> Self:
        """Set right hand select"""
        self._right = self._adopt(select)
        return self

    def junction(self, junction: Junction) -> Self:
        """Set set operator"""
        self._junction = Junction(junction)
        return self

    @property
    def left(self):
        """Left hand select, owned by this builder"""
        return self._left

    @property
    def right(self):
        """Right hand select, owned by this builder"""
        return self._right

    def _build(self, sql: SQLString):
        sql.add_string(self._left.render())
        sql.add_string(self._junction)
        sql.add_string(self._right.render())

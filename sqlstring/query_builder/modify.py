"""Data modification builders (update, insert, delete)"""

from typing import Any, Self

from .core import BaseBuilder
from .select import Select
from ..fragment import SQLString
from ..options import Conflict


class Update(BaseBuilder):
    """UPDATE statement.

    Like :class:`Select`, WHERE is always written even for an empty predicate."""

    def _clear(self):
        self._table = ""
        self._columns: list[str] = []
        self._values: list[str] = []
        self._quoted: list[bool] = []
        self._where = ""

    def add_column_value(self, column: str, value: Any, quoted: bool = False) -> Self:
        """Add an assignment. Value is quoted at render time when ``quoted`` is set."""
        self._columns.append(column)
        self._values.append(str(value))
        self._quoted.append(quoted)
        return self

    def set_table(self, table: str) -> Self:
        """Set target table"""
        self._table = table
        return self

    def where(self, predicate: str) -> Self:
        """Set predicate, replaces any previous one"""
        self._where = predicate
        return self

    @property
    def table(self):
        """Target table"""
        return self._table

    @property
    def columns(self):
        """Assigned columns"""
        return tuple(self._columns)

    @property
    def predicate(self):
        """Current predicate"""
        return self._where

    def _build(self, sql: SQLString):
        sql.add_string("UPDATE ")
        sql.add_string(self._table)
        sql.add_string(" SET ")
        last = len(self._columns) - 1
        for index, (column, value, quoted) in enumerate(
            zip(self._columns, self._values, self._quoted)
        ):
            add_comma = index != last
            sql.add_string(column)
            sql.add_string(" = ")
            if quoted:
                sql.add_string_with_quotes(value, add_comma)
            else:
                sql.add_string(value, add_comma)
            if add_comma:
                sql.add_string(" ")
        sql.add_string(" WHERE ")
        sql.add_string(self._where)


class Insert(BaseBuilder):
    """INSERT statement.

    When a select is set (:meth:`set_select`), the statement becomes
    ``INSERT ... INTO table SELECT ...`` and added column values are ignored."""

    def _clear(self):
        self._table = ""
        self._columns: list[str] = []
        self._values: list[str] = []
        self._select: Select | None = None
        self._conflict = Conflict.NONE

    def add_column_value(self, column: str, value: Any, quoted: bool = False) -> Self:
        """Add a column value. Value is quoted immediately when ``quoted`` is set."""
        value = str(value)
        self._columns.append(column)
        self._values.append(self._sql.quoted(value) if quoted else value)
        return self

    def set_table(self, table: str) -> Self:
        """Set target table"""
        self._table = table
        return self

    def set_select(self, select: Select | None) -> Self:
        """Insert rows from a select.

        The stored copy takes this builder's quote style."""
        self._select = self._adopt(select) if select is not None else None
        return self

    def conflict(self, conflict: Conflict) -> Self:
        """Set conflict resolution (OR REPLACE/OR IGNORE)"""
        self._conflict = Conflict(conflict)
        return self

    @property
    def table(self):
        """Target table"""
        return self._table

    @property
    def columns(self):
        """Inserted columns"""
        return tuple(self._columns)

    @property
    def values(self):
        """Inserted values, quoted ones include their quotes"""
        return tuple(self._values)

    @property
    def select(self):
        """Nested select, if any"""
        return self._select

    def _build(self, sql: SQLString):
        sql.add_string("INSERT ")
        sql.add_string(self._conflict)
        sql.add_string("INTO ")
        sql.add_string(self._table)
        sql.add_string(" ")
        if self._select is not None:
            sql.add_string(self._select.render())
            return
        sql.add_strings_with_parens(self._columns, ",")
        sql.add_string(" VALUES ")
        sql.add_strings_with_parens(self._values, ",")


class Delete(BaseBuilder):
    """DELETE statement. WHERE is only written for a non-empty predicate."""

    def _clear(self):
        self._table = ""
        self._where = ""

    def set_table(self, table: str) -> Self:
        """Set target table"""
        self._table = table
        return self

    def where(self, predicate: str) -> Self:
        """Set predicate, replaces any previous one"""
        self._where = predicate
        return self

    @property
    def table(self):
        """Target table"""
        return self._table

    @property
    def predicate(self):
        """Current predicate"""
        return self._where

    def _build(self, sql: SQLString):
        sql.add_string("DELETE FROM ")
        sql.add_string(self._table)
        sql.add_string(" ")
        if self._where:
            sql.add_string(" WHERE ")
            sql.add_string(self._where)

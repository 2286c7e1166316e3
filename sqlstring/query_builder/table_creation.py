"""Table and index creation"""

from typing import Iterable, Self

from .core import BaseBuilder
from ..fragment import SQLString
from ..typings import DefaultValue, ForeignKey


def _as_columns(columns: str | Iterable[str]) -> tuple[str, ...]:
    if isinstance(columns, str):
        return (columns,)
    return tuple(columns)


class CreateTable(BaseBuilder):
    """CREATE TABLE statement"""

    def __init__(self, double_quotes: bool | str = False, if_not_exists: bool = False):
        self._if_not_exists = if_not_exists
        super().__init__(double_quotes)

    def _clear(self):
        self._table = ""
        self._rows: list[str] = []
        self._foreign_keys: list[ForeignKey] = []

    @property
    def if_not_exists(self):
        """Is IF NOT EXISTS written?"""
        return self._if_not_exists

    @property
    def table(self):
        """Table name"""
        return self._table

    @property
    def rows(self):
        """Rendered column definitions"""
        return tuple(self._rows)

    @property
    def foreign_keys(self):
        """Foreign key constraints, in order of addition"""
        return tuple(self._foreign_keys)

    def set_table(self, table: str) -> Self:
        """Set table name"""
        self._table = table
        return self

    def add_row(
        self,
        name: str,
        type_: str,
        primary: bool = False,
        default: DefaultValue | None = None,
    ) -> Self:
        """Add a column definition.

        Args:
            name (str): Column name
            type_ (str): Column type, written as is
            primary (bool, optional): Is primary key. Defaults to False.
            default (DefaultValue | None, optional): Default value. Ignored when
                ``primary`` is set. Defaults to None.
        """
        row = SQLString(self.quote)
        row.add_string(name)
        row.add_string(" ")
        row.add_string(type_)
        row.add_string(" ")
        if primary:
            row.add_string(" PRIMARY KEY ")
        elif default is not None:
            value, use_quotes = default
            row.add_string(" DEFAULT ")
            if use_quotes:
                row.add_string_with_quotes(str(value))
            else:
                row.add_string(str(value))
        self._rows.append(row.render())
        return self

    def add_foreign_key(
        self,
        columns: str | Iterable[str],
        references: str | Iterable[str],
        table: str,
    ) -> Self:
        """Add ``FOREIGN KEY (columns) REFERENCES table(references)``.

        A single column may be given as a plain string."""
        self._foreign_keys.append(
            ForeignKey(_as_columns(columns), _as_columns(references), table)
        )
        return self

    def _build(self, sql: SQLString):
        sql.add_string("CREATE TABLE ")
        if self._if_not_exists:
            sql.add_string("IF NOT EXISTS ")
        sql.add_string(self._table)
        if not self._foreign_keys:
            sql.add_strings_with_parens(self._rows)
            return
        sql.add_string("(")
        sql.add_strings(self._rows)
        for foreign in self._foreign_keys:
            sql.add_string(", FOREIGN KEY ")
            sql.add_strings_with_parens(foreign.columns)
            sql.add_string(" REFERENCES ")
            sql.add_string(foreign.table)
            sql.add_strings_with_parens(foreign.references)
        sql.add_string(")")


class CreateIndex(BaseBuilder):
    """CREATE INDEX statement. A predicate makes it a partial index."""

    def __init__(
        self,
        double_quotes: bool | str = False,
        unique: bool = False,
        if_not_exists: bool = False,
    ):
        self._unique = unique
        self._if_not_exists = if_not_exists
        super().__init__(double_quotes)

    def _clear(self):
        self._name = ""
        self._table = ""
        self._columns: list[str] = []
        self._where = ""

    @property
    def unique(self):
        """Is this a unique index?"""
        return self._unique

    @property
    def if_not_exists(self):
        """Is IF NOT EXISTS written?"""
        return self._if_not_exists

    @property
    def name(self):
        """Index name"""
        return self._name

    @property
    def table(self):
        """Indexed table"""
        return self._table

    @property
    def columns(self):
        """Indexed columns"""
        return tuple(self._columns)

    def set_name(self, name: str) -> Self:
        """Set index name"""
        self._name = name
        return self

    def set_table(self, table: str) -> Self:
        """Set indexed table"""
        self._table = table
        return self

    def add_column(self, *columns: str) -> Self:
        """Add indexed columns"""
        self._columns.extend(columns)
        return self

    def where(self, predicate: str) -> Self:
        """Set partial index predicate"""
        self._where = predicate
        return self

    def _build(self, sql: SQLString):
        sql.add_string("CREATE ")
        if self._unique:
            sql.add_string("UNIQUE ")
        sql.add_string("INDEX ")
        if self._if_not_exists:
            sql.add_string("IF NOT EXISTS ")
        sql.add_string(self._name)
        sql.add_string(" ON ")
        sql.add_string(self._table)
        sql.add_strings_with_parens(self._columns)
        if self._where:
            sql.add_string(" WHERE ")
            sql.add_string(self._where)

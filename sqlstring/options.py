"""Statement options

Every option maps to the literal it renders to. The ``NONE`` members render
to nothing."""

from enum import StrEnum


class SelectOption(StrEnum):
    """ALL/DISTINCT/UNIQUE modifier of select"""

    NONE = ""
    ALL = "ALL "
    DISTINCT = "DISTINCT "
    UNIQUE = "UNIQUE "


class Junction(StrEnum):
    """Compound select operator"""

    UNION = " UNION "
    UNION_ALL = " UNION ALL "
    INTERSECT = " INTERSECT "
    EXCEPT = " EXCEPT "


class Conflict(StrEnum):
    """Insert conflict resolution"""

    NONE = ""
    REPLACE = "OR REPLACE "
    IGNORE = "OR IGNORE "


class TransactionKind(StrEnum):
    """Transaction control"""

    BEGIN = "BEGIN"
    COMMIT = "COMMIT"
    ROLLBACK = "ROLLBACK"


NONE = SelectOption.NONE
ALL = SelectOption.ALL
DISTINCT = SelectOption.DISTINCT
UNIQUE = SelectOption.UNIQUE

UNION = Junction.UNION
UNION_ALL = Junction.UNION_ALL
INTERSECT = Junction.INTERSECT
EXCEPT = Junction.EXCEPT

REPLACE = Conflict.REPLACE
IGNORE = Conflict.IGNORE

BEGIN = TransactionKind.BEGIN
COMMIT = TransactionKind.COMMIT
ROLLBACK = TransactionKind.ROLLBACK

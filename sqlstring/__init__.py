"""SQL string builder"""

from .fragment import SQLString
from .options import SelectOption, Junction, Conflict, TransactionKind
from .typings import DefaultValue, ForeignKey
from .errors import BuilderError, NegativeValueError, QuoteStyleError
from .query_builder import (
    Select,
    CompoundSelect,
    Update,
    Insert,
    Delete,
    CreateTable,
    CreateIndex,
    Transaction,
)


def test_installed():
    """Is the module installed?"""
    return True


__version__ = "0.1.0"
__all__ = [
    "SQLString",
    "Select",
    "CompoundSelect",
    "Update",
    "Insert",
    "Delete",
    "CreateTable",
    "CreateIndex",
    "Transaction",
    "SelectOption",
    "Junction",
    "Conflict",
    "TransactionKind",
    "DefaultValue",
    "ForeignKey",
    "BuilderError",
    "NegativeValueError",
    "QuoteStyleError",
]

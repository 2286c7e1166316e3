"""Query Builder"""

from .core import BaseBuilder
from .select import Select, CompoundSelect
from .modify import Update, Insert, Delete
from .table_creation import CreateTable, CreateIndex
from .transaction import Transaction

__all__ = [
    "BaseBuilder",
    "Select",
    "CompoundSelect",
    "Update",
    "Insert",
    "Delete",
    "CreateTable",
    "CreateIndex",
    "Transaction",
]

"""Transaction control"""

from .core import BaseBuilder
from ..fragment import SQLString
from ..options import TransactionKind


class Transaction(BaseBuilder):
    """BEGIN/COMMIT/ROLLBACK TRANSACTION"""

    def __init__(
        self,
        kind: TransactionKind = TransactionKind.BEGIN,
        double_quotes: bool | str = False,
    ) -> None:
        self._kind = TransactionKind(kind)
        super().__init__(double_quotes)

    @property
    def kind(self):
        """Transaction kind"""
        return self._kind

    def _build(self, sql: SQLString):
        sql.add_string(self._kind)
        sql.add_string(" TRANSACTION")

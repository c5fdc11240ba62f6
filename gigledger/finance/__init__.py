"""Mini README: Finance core for Gig Ledger.

This package holds the transaction model, the summary arithmetic and the
in-memory ledger that owns the transaction log. The ledger announces every
append through a ``Broadcaster`` so views stay synchronised without the
ledger knowing who is listening.
"""

from .ledger import Ledger
from .transactions import (
    Summary,
    Transaction,
    TransactionKind,
    format_amount,
    parse_amount,
    summarise,
)

__all__ = [
    "Ledger",
    "Summary",
    "Transaction",
    "TransactionKind",
    "format_amount",
    "parse_amount",
    "summarise",
]

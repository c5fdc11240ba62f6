"""Mini README: Form submission handling for new transactions.

Structure:
    * TransactionForm - presence validation of raw fields before recording.

The form only checks that the date and amount were supplied; value validation
(numeric amount, known kind) happens when the ledger builds the transaction.
Either way a rejected submission leaves the ledger untouched.
"""

from __future__ import annotations

from typing import List, Optional

from ..errors import MissingFieldError
from ..finance import Ledger, Transaction, TransactionKind
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

REQUIRED_FIELDS = ("date", "amount")


def _is_blank(value: Optional[object]) -> bool:
    return value is None or not str(value).strip()


class TransactionForm:
    """Turn raw form input into ledger entries."""

    def __init__(self, ledger: Ledger) -> None:
        self.ledger = ledger

    def submit(
        self,
        date: Optional[str],
        amount: Optional[str],
        kind: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Transaction:
        """Record the submission or raise without touching the ledger."""

        values = {"date": date, "amount": amount}
        missing: List[str] = [name for name in REQUIRED_FIELDS if _is_blank(values[name])]
        if missing:
            LOGGER.warning("Rejected submission with missing fields: %s", ", ".join(missing))
            raise MissingFieldError(missing)
        return self.ledger.record(
            date,
            amount,
            TransactionKind.EXPENSE if _is_blank(kind) else kind,
            category or "",
        )

"""Mini README: In-memory ledger owning the gig transaction log.

Structure:
    * Ledger - ordered, append-only store of transactions and the sole source
      of summary statistics.

Appending is the only mutation. After every append the ledger hands the
complete sequence to its ``Broadcaster`` so listeners always see full state.
Statistics are recomputed from the whole log on each request rather than
maintained incrementally.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..broadcasting.base import LedgerListener
from ..broadcasting.broadcaster import Broadcaster, NotificationResult
from ..logging_utils import get_logger
from .transactions import Summary, Transaction, TransactionKind, summarise

LOGGER = get_logger(__name__)


class Ledger:
    """Append-only transaction log that broadcasts every change."""

    def __init__(
        self,
        broadcaster: Optional[Broadcaster] = None,
        transactions: Optional[Iterable[Transaction]] = None,
    ) -> None:
        self._broadcaster = broadcaster if broadcaster is not None else Broadcaster()
        self._transactions: List[Transaction] = list(transactions or [])
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    @property
    def broadcaster(self) -> Broadcaster:
        return self._broadcaster

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Snapshot of the log in insertion order."""

        return tuple(self._transactions)

    def most_recent_first(self) -> List[Transaction]:
        """Return transactions in reverse entry order."""

        return list(reversed(self._transactions))

    def subscribe(self, listener: LedgerListener) -> int:
        return self._broadcaster.subscribe(listener)

    def unsubscribe(self, token: int) -> None:
        self._broadcaster.unsubscribe(token)

    def append(self, transaction: Transaction) -> NotificationResult:
        """Add a transaction to the end of the log and notify listeners."""

        if not isinstance(transaction, Transaction):
            raise TypeError(f"Ledger entries must be Transaction instances, not {type(transaction).__name__}")
        self._transactions.append(transaction)
        LOGGER.info(
            "Recorded %s of %s on %s (%s entries)",
            transaction.kind.value,
            transaction.amount,
            transaction.date,
            len(self._transactions),
        )
        return self._broadcaster.notify(self.transactions)

    def record(
        self,
        date: object,
        amount: object,
        kind: object = TransactionKind.EXPENSE,
        category: object = "",
    ) -> Transaction:
        """Validate raw field values, then append the resulting transaction."""

        transaction = Transaction.create(date, amount, kind, category)
        self.append(transaction)
        return transaction

    def compute_summary(self) -> Summary:
        """Total the whole log afresh."""

        return summarise(self._transactions)

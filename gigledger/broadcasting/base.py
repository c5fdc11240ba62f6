"""Mini README: Abstract listener describing how views consume ledger changes.

Structure:
    * LedgerListener - interface implemented by summary, chart and plugin views.

Listeners receive the complete transaction sequence on every change, never a
delta, so each one can rebuild its state from scratch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..finance.transactions import Transaction


class LedgerListener(ABC):
    """Base interface for collaborators interested in ledger changes."""

    listener_name: str = "listener"

    @abstractmethod
    def update(self, transactions: Sequence[Transaction]) -> None:
        """React to the current, complete transaction sequence."""


def describe_listener(listener: object) -> str:
    """Return a readable identifier for logs and failure reports."""

    name = getattr(listener, "listener_name", None)
    if name:
        return str(name)
    return type(listener).__name__

"""Mini README: Summary listener producing totals, entries and report text.

Structure:
    * EntryLine - one rendered row of the transaction list.
    * SummaryView - listener rebuilding the net label, the most recent first
      list and the report message on every ledger change.

The report message is the text handed to the share links, so its wording is
configurable through ``GigLedgerSettings``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..broadcasting import LedgerListener
from ..finance.transactions import Summary, Transaction, format_amount, summarise
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

POSITIVE_COLOUR = "green"
NEGATIVE_COLOUR = "red"
DEFAULT_GREETING = "Hello, here is my Gig Finance Report."


@dataclass(frozen=True, slots=True)
class EntryLine:
    """A rendered transaction row."""

    text: str
    colour: str


class SummaryView(LedgerListener):
    """Render the running total, entry list and report message."""

    listener_name = "summary"

    def __init__(self, *, currency_label: str = "RM", greeting: str = DEFAULT_GREETING) -> None:
        self.currency_label = currency_label
        self.greeting = greeting
        self.summary = Summary()
        self.entries: List[EntryLine] = []
        self.report_message = self._build_report(self.summary)
        self.update_count = 0

    @property
    def net_profit_text(self) -> str:
        return f"{self.summary.net:.2f}"

    @property
    def net_colour(self) -> str:
        return POSITIVE_COLOUR if self.summary.net >= 0 else NEGATIVE_COLOUR

    def update(self, transactions: Sequence[Transaction]) -> None:
        self.summary = summarise(transactions)
        self.entries = [self._render_entry(transaction) for transaction in reversed(transactions)]
        self.report_message = self._build_report(self.summary)
        self.update_count += 1
        LOGGER.debug("Summary view refreshed: net=%s entries=%s", self.net_profit_text, len(self.entries))

    def _render_entry(self, transaction: Transaction) -> EntryLine:
        colour = POSITIVE_COLOUR if transaction.is_income else NEGATIVE_COLOUR
        text = (
            f"{transaction.date} - {transaction.category}: "
            f"{self.currency_label} {format_amount(transaction.amount)}"
        )
        return EntryLine(text=text, colour=colour)

    def _build_report(self, summary: Summary) -> str:
        currency = self.currency_label
        return "\n".join(
            [
                self.greeting,
                f"Total Income: {currency} {format_amount(summary.total_income)}",
                f"Total Expenses: {currency} {format_amount(summary.total_expense)}",
                f"Net Profit: {currency} {format_amount(summary.net)}",
            ]
        )

    def as_dict(self) -> Dict[str, object]:
        """Export the rendered state for JSON responses and templates."""

        return {
            "net_profit": self.net_profit_text,
            "net_colour": self.net_colour,
            "entries": [{"text": entry.text, "colour": entry.colour} for entry in self.entries],
            "report_message": self.report_message,
        }

"""Mini README: Transaction records and summary arithmetic.

Structure:
    * TransactionKind - enum representing income versus expense entries.
    * Transaction - immutable record of a single entry with a validating factory.
    * Summary - derived totals (income, expense, net) over a transaction sequence.
    * parse_amount / format_amount - boundary helpers for amount text.

Amounts are validated where raw input becomes a ``Transaction`` so that a
malformed value can never reach the ledger and poison its totals.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, Iterable

from ..errors import InvalidAmountError, InvalidTransactionKindError, MissingFieldError


class TransactionKind(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: object) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as error:
            raise InvalidTransactionKindError(f"Unsupported transaction kind: {value!r}") from error


def parse_amount(raw: object) -> float:
    """Convert amount input into a finite, non-negative float."""

    if isinstance(raw, bool) or (isinstance(raw, str) and "_" in raw):
        raise InvalidAmountError(f"Invalid amount: {raw!r}")
    try:
        amount = float(raw.strip() if isinstance(raw, str) else raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as error:
        raise InvalidAmountError(f"Invalid amount: {raw!r}") from error
    if not math.isfinite(amount):
        raise InvalidAmountError(f"Invalid amount: {raw!r}")
    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative: {raw!r}")
    return amount


def format_amount(value: float) -> str:
    """Render an amount the way a browser prints a number.

    Whole numbers lose the trailing ``.0``; exponent notation is used only
    outside ``1e-6 <= |value| < 1e21`` and is written as ``1e+21`` or ``1e-7``.
    """

    number = float(value)
    magnitude = abs(number)
    if number.is_integer() and magnitude < 1e21:
        return str(int(number))
    text = repr(number)
    if 1e-6 <= magnitude < 1e21:
        return format(Decimal(text), "f")
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single recorded income or expense entry."""

    date: str
    amount: float
    kind: TransactionKind
    category: str = ""

    def __post_init__(self) -> None:
        # Every construction path goes through here, including direct calls.
        date_text = "" if self.date is None else str(self.date).strip()
        if not date_text:
            raise MissingFieldError(["date"])
        object.__setattr__(self, "date", date_text)
        object.__setattr__(self, "amount", parse_amount(self.amount))
        object.__setattr__(self, "kind", TransactionKind.from_str(self.kind))
        object.__setattr__(self, "category", "" if self.category is None else str(self.category).strip())

    @classmethod
    def create(
        cls,
        date: object,
        amount: object,
        kind: object = TransactionKind.EXPENSE,
        category: object = "",
    ) -> "Transaction":
        """Build a transaction from raw field values, validating each one."""

        return cls(date=date, amount=amount, kind=kind, category=category)  # type: ignore[arg-type]

    @property
    def is_income(self) -> bool:
        return self.kind is TransactionKind.INCOME

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "date": self.date,
            "amount": self.amount,
            "kind": self.kind.value,
            "category": self.category,
        }


@dataclass(frozen=True, slots=True)
class Summary:
    """Aggregate totals derived from a transaction sequence."""

    total_income: float = 0.0
    total_expense: float = 0.0

    @property
    def net(self) -> float:
        return self.total_income - self.total_expense

    def as_dict(self) -> Dict[str, float]:
        return {
            "total_income": self.total_income,
            "total_expense": self.total_expense,
            "net": self.net,
        }


def summarise(transactions: Iterable[Transaction]) -> Summary:
    """Total a sequence, counting anything that is not income as expense."""

    income = 0.0
    expense = 0.0
    for transaction in transactions:
        if transaction.is_income:
            income += transaction.amount
        else:
            expense += transaction.amount
    return Summary(total_income=income, total_expense=expense)

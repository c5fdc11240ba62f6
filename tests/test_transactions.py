"""Mini README: Tests for transaction construction and summary arithmetic.

Structure:
    * amount parsing - finite, non-negative plain decimal numbers only.
    * construction - every path, including the bare constructor, validates.
    * kind parsing - income/expense in any casing, anything else rejected.
    * summarise / format_amount - binary totals and report number text.
"""

from __future__ import annotations

import dataclasses

import pytest

from gigledger.errors import (
    GigLedgerError,
    InvalidAmountError,
    InvalidTransactionKindError,
    MissingFieldError,
)
from gigledger.finance import Transaction, TransactionKind, format_amount, parse_amount, summarise


@pytest.mark.parametrize("raw, expected", [("100", 100.0), (" 12.50 ", 12.5), ("0", 0.0), (7, 7.0)])
def test_parse_amount_accepts_numeric_input(raw: object, expected: float) -> None:
    """Plain numbers and numeric text convert to floats."""

    assert parse_amount(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["abc", "", "nan", "inf", "-5", None, True, "1_000", "1_0.5"])
def test_parse_amount_rejects_invalid_input(raw: object) -> None:
    """Text that is not a finite, non-negative plain decimal is refused."""

    with pytest.raises(InvalidAmountError):
        parse_amount(raw)


def test_invalid_amount_is_a_value_error_and_domain_error() -> None:
    """Callers may catch either the built-in or the package error family."""

    with pytest.raises(ValueError):
        Transaction.create("2024-01-01", "abc", "income", "gig")
    with pytest.raises(GigLedgerError):
        Transaction.create("2024-01-01", "abc", "income", "gig")


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), -1.0, "abc"])
def test_constructor_validates_amount(amount: object) -> None:
    """Building a Transaction directly applies the same amount checks."""

    with pytest.raises(InvalidAmountError):
        Transaction("2024-01-01", amount, TransactionKind.INCOME, "gig")  # type: ignore[arg-type]


def test_constructor_coerces_and_validates_kind() -> None:
    """A plain kind string becomes the enum; unknown kinds are refused."""

    transaction = Transaction("2024-01-01", 5.0, "Income", "gig")  # type: ignore[arg-type]

    assert transaction.kind is TransactionKind.INCOME
    with pytest.raises(InvalidTransactionKindError):
        Transaction("2024-01-01", 5.0, "refund", "gig")  # type: ignore[arg-type]


def test_constructor_requires_date() -> None:
    """A blank date is rejected whichever way the record is built."""

    with pytest.raises(MissingFieldError):
        Transaction(" ", 5.0, TransactionKind.EXPENSE, "fuel")
    with pytest.raises(MissingFieldError):
        Transaction.create("  ", "10", "expense", "fuel")


def test_kind_parsing_is_case_insensitive_and_strict() -> None:
    """Kinds tolerate casing and whitespace but nothing beyond the two values."""

    assert TransactionKind.from_str(" Income ") is TransactionKind.INCOME
    assert TransactionKind.from_str(TransactionKind.EXPENSE) is TransactionKind.EXPENSE
    with pytest.raises(InvalidTransactionKindError):
        TransactionKind.from_str("refund")


def test_create_normalises_fields() -> None:
    """Raw form values are stripped and converted to their typed forms."""

    transaction = Transaction.create(" 2024-01-01 ", "100", "INCOME", " gig ")

    assert transaction.date == "2024-01-01"
    assert transaction.amount == pytest.approx(100.0)
    assert transaction.kind is TransactionKind.INCOME
    assert transaction.category == "gig"
    assert transaction.as_dict() == {
        "date": "2024-01-01",
        "amount": 100.0,
        "kind": "income",
        "category": "gig",
    }


def test_transactions_are_immutable() -> None:
    """Fields cannot be reassigned once the record exists."""

    transaction = Transaction.create("2024-01-01", "10", "expense", "fuel")
    with pytest.raises(dataclasses.FrozenInstanceError):
        transaction.amount = 20.0  # type: ignore[misc]


def test_summarise_groups_by_kind() -> None:
    """Totals are the sums per kind and net is their difference."""

    transactions = [
        Transaction.create("2024-01-01", "100", "income", "gig"),
        Transaction.create("2024-01-02", "40", "expense", "fuel"),
        Transaction.create("2024-01-03", "25.5", "income", "tips"),
    ]

    summary = summarise(transactions)

    assert summary.total_income == pytest.approx(125.5)
    assert summary.total_expense == pytest.approx(40.0)
    assert summary.net == pytest.approx(summary.total_income - summary.total_expense)


def test_summarise_empty_sequence_is_zero() -> None:
    """An empty log yields zero totals."""

    assert summarise([]).as_dict() == {"total_income": 0.0, "total_expense": 0.0, "net": 0.0}


@pytest.mark.parametrize(
    "value, text",
    [
        (100.0, "100"),
        (60.5, "60.5"),
        (-12.0, "-12"),
        (0.0, "0"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e-5, "0.00001"),
        (1e16, "10000000000000000"),
        (1e21, "1e+21"),
        (1.5e22, "1.5e+22"),
        (1e-7, "1e-7"),
    ],
)
def test_format_amount_follows_browser_number_text(value: float, text: str) -> None:
    """Report numbers read the same as the browser would print them."""

    assert format_amount(value) == text

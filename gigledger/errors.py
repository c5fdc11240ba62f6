"""Mini README: Domain exceptions raised by Gig Ledger.

Every error subclasses ``ValueError`` as well as ``GigLedgerError`` so callers
can either treat them as ordinary bad input or catch the package family as a
whole. Interfaces translate them into HTTP 400 responses or CLI exit codes.
"""


class GigLedgerError(Exception):
    """Base class for all Gig Ledger domain errors."""


class InvalidAmountError(GigLedgerError, ValueError):
    """Raised when an amount is not a finite, non-negative number."""


class InvalidTransactionKindError(GigLedgerError, ValueError):
    """Raised when a transaction kind is neither income nor expense."""


class MissingFieldError(GigLedgerError, ValueError):
    """Raised when required form input is absent."""

    def __init__(self, fields):
        self.fields = tuple(fields)
        super().__init__(f"Please fill in all fields: missing {', '.join(self.fields)}.")

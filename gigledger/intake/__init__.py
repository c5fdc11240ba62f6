"""Mini README: Input handling for new ledger entries.

Exports ``TransactionForm`` which checks raw form fields for presence and
passes complete submissions to the ledger.
"""

from .form_handler import TransactionForm

__all__ = ["TransactionForm"]

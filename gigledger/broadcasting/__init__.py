"""Mini README: Change notification subsystem for Gig Ledger.

Re-exports the listener contract and the broadcaster that fans ledger
changes out to every registered listener. ``base`` holds the abstract
listener, ``broadcaster`` the subscription bookkeeping and the isolated
notification pass.
"""

from .base import LedgerListener
from .broadcaster import Broadcaster, ListenerFailure, NotificationResult

__all__ = [
    "Broadcaster",
    "LedgerListener",
    "ListenerFailure",
    "NotificationResult",
]

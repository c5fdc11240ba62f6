"""Mini README: Synchronous fan-out of ledger changes to listeners.

Structure:
    * Broadcaster - keeps subscriptions keyed by token and notifies them in order.
    * NotificationResult / ListenerFailure - outcome of a single notification pass.

Each listener runs inside its own error boundary: a failure is logged and
recorded, and the remaining listeners are still notified in the same pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Sequence

from ..logging_utils import get_logger
from .base import LedgerListener, describe_listener

if TYPE_CHECKING:
    from ..finance.transactions import Transaction

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class ListenerFailure:
    """A listener that raised while handling a notification."""

    token: int
    listener_name: str
    error: Exception


@dataclass(slots=True)
class NotificationResult:
    """Summary of one notification pass."""

    delivered: int = 0
    failures: List[ListenerFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class Broadcaster:
    """Registry of ledger listeners with isolated, ordered notification."""

    def __init__(self) -> None:
        self._listeners: Dict[int, LedgerListener] = {}
        self._next_token = 0

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: LedgerListener) -> int:
        """Register a listener for all future notifications and return its token."""

        if not callable(getattr(listener, "update", None)):
            raise TypeError(f"{describe_listener(listener)} does not provide an update() method")
        self._next_token += 1
        self._listeners[self._next_token] = listener
        LOGGER.debug("Subscribed listener '%s' as #%s", describe_listener(listener), self._next_token)
        return self._next_token

    def unsubscribe(self, token: int) -> None:
        """Remove the subscription identified by ``token``."""

        if token not in self._listeners:
            raise KeyError(f"Subscription {token} is not registered")
        listener = self._listeners.pop(token)
        LOGGER.debug("Unsubscribed listener '%s' (#%s)", describe_listener(listener), token)

    def notify(self, transactions: Sequence[Transaction]) -> NotificationResult:
        """Invoke every listener in subscription order with the same sequence."""

        result = NotificationResult()
        # Copy so a listener subscribing during the pass is only notified next time.
        for token, listener in list(self._listeners.items()):
            try:
                listener.update(transactions)
            except Exception as error:
                name = describe_listener(listener)
                LOGGER.exception("Listener '%s' failed while handling %s transactions", name, len(transactions))
                result.failures.append(ListenerFailure(token=token, listener_name=name, error=error))
            else:
                result.delivered += 1
        LOGGER.debug(
            "Notification pass delivered=%s failed=%s", result.delivered, len(result.failures)
        )
        return result

"""Mini README: Dynamic listener plugin loading.

Structure:
    * load_listener_plugins - instantiate listeners registered via entry points.

Packages can expose a zero-argument factory under the ``gigledger.listeners``
entry point group; each loaded listener is subscribed to the session ledger
after the built-in views.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import List

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

LISTENER_GROUP = "gigledger.listeners"


def load_listener_plugins(group: str = LISTENER_GROUP) -> List[object]:
    """Load entry point factories and return the listeners they build."""

    listeners: List[object] = []
    for entry_point in entry_points(group=group):
        try:
            factory = entry_point.load()
            listener = factory()
        except Exception:
            LOGGER.exception("Failed to load listener plugin '%s'", entry_point.name)
            continue
        if not callable(getattr(listener, "update", None)):
            LOGGER.warning("Plugin '%s' did not produce a listener; skipping", entry_point.name)
            continue
        listeners.append(listener)
        LOGGER.info("Loaded listener plugin '%s'", entry_point.name)
    return listeners

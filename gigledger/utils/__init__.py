"""Mini README: Utility helpers for Gig Ledger.

Currently exports the entry point loader used to attach extra ledger
listeners shipped by third-party packages.
"""

from .plugin_loader import load_listener_plugins

__all__ = ["load_listener_plugins"]

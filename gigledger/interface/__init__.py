"""Mini README: Interactive interfaces for Gig Ledger.

Exports the FastAPI application factory that powers the browser tracker.
The command line entry point lives in ``gig_tracker.py`` at the repository
root.
"""

from .web_app import create_application

__all__ = ["create_application"]

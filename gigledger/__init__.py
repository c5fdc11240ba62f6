"""Mini README: Core package initializer for Gig Ledger.

Gig Ledger keeps an in-memory log of gig income and expenses, keeps the
summary and chart views in step with it, and builds shareable reports. This
module re-exports the logging helper so modules and scripts can obtain a
configured logger without knowing the package layout.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]

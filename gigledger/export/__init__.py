"""Mini README: Report export helpers for Gig Ledger.

Exposes the share-link builder that hands report text to WhatsApp or the
default mail client.
"""

from .share_links import ReportSharer, encode_uri_component

__all__ = ["ReportSharer", "encode_uri_component"]

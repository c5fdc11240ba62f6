"""Mini README: Tracker session owning the ledger and its collaborators.

Structure:
    * TrackerSession - one ledger per running session plus the views, the
      form handler and the share-link builder wired to it.
    * create_session - build a session from ``GigLedgerSettings``.

The session replaces any module-level shared state: interfaces hold a
session object and pass its parts to whatever needs them. Logging out simply
rebuilds every part, dropping all recorded entries.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .configuration import GigLedgerSettings, get_settings
from .errors import MissingFieldError
from .export import ReportSharer
from .finance import Ledger
from .intake import TransactionForm
from .logging_utils import get_logger
from .utils import load_listener_plugins
from .views import ChartView, SummaryView

LOGGER = get_logger(__name__)


class TrackerSession:
    """Compose the ledger with its listeners for a single user session."""

    def __init__(
        self,
        settings: GigLedgerSettings,
        *,
        extra_listeners: Optional[Iterable[object]] = None,
    ) -> None:
        self.settings = settings
        self._extra_listeners: List[object] = list(extra_listeners or [])
        self.username: Optional[str] = None
        self.sharer = ReportSharer(
            whatsapp_base_url=settings.whatsapp_base_url,
            email_subject=settings.email_subject,
        )
        self._build()

    def _build(self) -> None:
        self.ledger = Ledger()
        self.summary_view = SummaryView(
            currency_label=self.settings.currency_label,
            greeting=self.settings.report_greeting,
        )
        self.chart_view = ChartView()
        self.ledger.subscribe(self.summary_view)
        self.ledger.subscribe(self.chart_view)
        for listener in self._extra_listeners:
            self.ledger.subscribe(listener)  # type: ignore[arg-type]
        self.form = TransactionForm(self.ledger)
        LOGGER.debug("Session wired with %s listeners", self.ledger.broadcaster.listener_count)

    @property
    def is_authenticated(self) -> bool:
        return self.username is not None

    def login(self, username: Optional[str]) -> None:
        """Accept any non-blank username."""

        name = (username or "").strip()
        if not name:
            raise MissingFieldError(["username"])
        self.username = name
        LOGGER.info("User '%s' logged in", name)

    def logout(self) -> None:
        """Forget the user and every recorded entry."""

        LOGGER.info("User '%s' logged out; discarding %s entries", self.username, len(self.ledger))
        self.username = None
        self._build()

    def whatsapp_link(self) -> str:
        return self.sharer.whatsapp_link(self.summary_view.report_message)

    def email_link(self) -> str:
        return self.sharer.email_link(self.summary_view.report_message)


def create_session(
    settings: Optional[GigLedgerSettings] = None,
    *,
    load_plugins: bool = True,
) -> TrackerSession:
    """Build a session from configuration, attaching any listener plugins."""

    settings = settings or get_settings()
    plugins = load_listener_plugins() if load_plugins else []
    return TrackerSession(settings, extra_listeners=plugins)

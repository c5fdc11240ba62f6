"""Mini README: FastAPI-powered browser tracker for Gig Ledger.

Structure:
    * create_application - application factory wiring routes and templates.
    * Session state - a single ``TrackerSession`` held by the application.

The login page gates the dashboard. The dashboard posts entries, renders the
summary list and net total, draws the chart from ``/chart`` and offers the
WhatsApp and e-mail share links built from the current report.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import get_settings
from ..errors import GigLedgerError
from ..finance import TransactionKind
from ..logging_utils import configure_root_logger, get_logger
from ..session import TrackerSession, create_session

LOGGER = get_logger(__name__)


def create_application(session: Optional[TrackerSession] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    app = FastAPI(title="Gig Ledger", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    tracker = session or create_session(settings)

    def _require_login() -> None:
        if not tracker.is_authenticated:
            raise HTTPException(status_code=401, detail="Please log in first.")

    def _summary_payload() -> dict:
        return {
            "summary": tracker.ledger.compute_summary().as_dict(),
            "view": tracker.summary_view.as_dict(),
            "count": len(tracker.ledger),
        }

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request) -> HTMLResponse:
        """Render the login page or the dashboard."""

        if not tracker.is_authenticated:
            return templates.TemplateResponse(request, "login.html", {})
        LOGGER.debug("Rendering dashboard for %s with %s entries", tracker.username, len(tracker.ledger))
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "username": tracker.username,
                "kinds": [kind.value for kind in TransactionKind],
                "view": tracker.summary_view,
                "currency": settings.currency_label,
            },
        )

    @app.post("/login")
    async def login(username: str = Form("")) -> RedirectResponse:
        try:
            tracker.login(username)
        except GigLedgerError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return RedirectResponse("/", status_code=303)

    @app.post("/logout")
    async def logout() -> RedirectResponse:
        tracker.logout()
        return RedirectResponse("/", status_code=303)

    @app.post("/transactions")
    async def add_transaction(
        date: str = Form(""),
        amount: str = Form(""),
        kind: str = Form(TransactionKind.EXPENSE.value),
        category: str = Form(""),
    ) -> JSONResponse:
        """Record a submitted entry and return the refreshed summary."""

        _require_login()
        try:
            transaction = tracker.form.submit(date, amount, kind, category)
        except GigLedgerError as error:
            LOGGER.info("Rejected entry: %s", error)
            raise HTTPException(status_code=400, detail=str(error)) from error
        payload = _summary_payload()
        payload["transaction"] = transaction.as_dict()
        return JSONResponse(payload, status_code=201)

    @app.get("/transactions")
    async def list_transactions() -> JSONResponse:
        """Return entries with the most recent first."""

        _require_login()
        entries = [transaction.as_dict() for transaction in tracker.ledger.most_recent_first()]
        return JSONResponse({"transactions": entries})

    @app.get("/summary")
    async def summary() -> JSONResponse:
        _require_login()
        return JSONResponse(_summary_payload())

    @app.get("/chart")
    async def chart() -> JSONResponse:
        _require_login()
        return JSONResponse({"chart": tracker.chart_view.as_config()})

    @app.get("/report/whatsapp")
    async def share_whatsapp() -> RedirectResponse:
        _require_login()
        return RedirectResponse(tracker.whatsapp_link())

    @app.get("/report/email")
    async def share_email() -> RedirectResponse:
        _require_login()
        return RedirectResponse(tracker.email_link())

    return app

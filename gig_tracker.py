"""Mini README: Entry point CLI for Gig Ledger.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI tracker under uvicorn, and ``report`` records entries given on the
command line in a throwaway session and prints the report with its share
links. Settings are drawn from ``GIGLEDGER_*`` environment variables.
"""

from __future__ import annotations

from typing import List

import typer
import uvicorn

from gigledger.configuration import get_settings
from gigledger.errors import GigLedgerError
from gigledger.logging_utils import configure_root_logger
from gigledger.session import create_session

cli = typer.Typer(help="Track gig income and expenses and share a finance report.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot navigate to the wildcard addresses, so point at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Gig Ledger on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "gigledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def report(
    entry: List[str] = typer.Option(
        [],
        "--entry",
        "-e",
        help="Entry as DATE,AMOUNT,KIND,CATEGORY (KIND and CATEGORY optional). Repeatable.",
    ),
) -> None:
    """Record entries in a fresh session and print the shareable report."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    session = create_session(settings, load_plugins=False)
    for raw in entry:
        fields = [part.strip() for part in raw.split(",", 3)]
        fields += [""] * (4 - len(fields))
        date, amount, kind, category = fields
        try:
            session.form.submit(date, amount, kind, category)
        except GigLedgerError as error:
            typer.echo(f"Invalid entry '{raw}': {error}", err=True)
            raise typer.Exit(code=1) from error

    view = session.summary_view
    typer.echo(view.report_message)
    typer.echo("")
    for line in view.entries:
        typer.echo(f"  {line.text}")
    typer.echo("")
    typer.echo(f"WhatsApp: {session.whatsapp_link()}")
    typer.echo(f"E-mail:   {session.email_link()}")


if __name__ == "__main__":
    cli()

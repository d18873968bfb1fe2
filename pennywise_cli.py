"""Mini README: Entry point CLI for the Pennywise dashboard.

This script exposes a Typer CLI that starts the FastAPI dashboard with
configurable host, port and production flags, and prints the static
currency table used for display conversions. Settings default to the
``PENNYWISE_*`` environment variables.
"""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from pennywise.configuration import get_settings
from pennywise.currency import CURRENCY_SYMBOLS, RATES, CurrencyCode, format_amount, unproject
from pennywise.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch and inspect the Pennywise finance dashboard.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the dashboard using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 / :: wildcard addresses directly.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Pennywise on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "pennywise.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def rates(
    amount: Optional[float] = typer.Option(
        None, help="Canonical (USD) amount to show in every currency."
    ),
    entered_in: Optional[str] = typer.Option(
        None, help="Treat AMOUNT as entered in this currency instead of USD."
    ),
) -> None:
    """Print the static exchange-rate table."""

    canonical = amount
    if amount is not None and entered_in:
        try:
            canonical = unproject(amount, entered_in)
        except ValueError as error:
            raise typer.BadParameter(str(error), param_hint="--entered-in") from error

    for code in CurrencyCode:
        line = f"{code.value:<4} {CURRENCY_SYMBOLS[code]:<4} {RATES[code]:>10.4f}"
        if canonical is not None:
            line += f"  {format_amount(canonical, code):>14}"
        typer.echo(line)


if __name__ == "__main__":
    cli()

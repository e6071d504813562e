"""Mini README: Entry point CLI for the vending machine simulator.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI control panel under uvicorn, and ``inventory`` prints the stock a
machine would be seeded with. Both read defaults from ``VENDINGSIM_``
environment variables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from vendingsim.configuration import get_settings
from vendingsim.inventory import InventoryError, load_inventory
from vendingsim.logging_utils import configure_root_logger

cli = typer.Typer(help="Run and inspect the vending machine simulator.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the control panel using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 wildcard, so point them at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting vending machine on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "vendingsim.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def inventory(
    path: Optional[Path] = typer.Option(
        None, help="Seed document to load instead of the configured one."
    ),
) -> None:
    """Print each stocked selection with its price and quantity."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    try:
        stock = load_inventory(path or settings.inventory_file)
    except InventoryError as error:
        typer.echo(f"Unable to load inventory: {error}", err=True)
        raise typer.Exit(code=1) from error
    for selection, item in sorted(stock.items(), key=lambda entry: entry[0].value):
        typer.echo(f"{selection.value:<12} {item.price:>6.2f}  x{item.quantity}")


if __name__ == "__main__":
    cli()

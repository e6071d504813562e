"""Mini README: FastAPI-powered control panel for a vending machine.

Structure:
    * create_application - application factory wiring routes and templates.
    * _build_machine - seeds a machine from the configured inventory.

The panel lists every selection with its icon, price and remaining stock,
shows the deposited balance and accepts deposit and vend requests. Machine
errors are translated to HTTP status codes so browser scripts can prompt
for more money or a different selection.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import get_settings
from ..inventory import Selection, load_inventory
from ..logging_utils import configure_root_logger, get_logger
from ..machine import (
    InsufficientFunds,
    InvalidSelection,
    OutOfStock,
    VendingMachine,
)
from .icons import icon_path

LOGGER = get_logger(__name__)


def _build_machine() -> VendingMachine:
    """Create a machine from settings, falling back to the bundled inventory."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    inventory = load_inventory(settings.inventory_file)
    return VendingMachine(inventory, initial_balance=settings.initial_balance)


def create_application(machine: Optional[VendingMachine] = None) -> FastAPI:
    """Create the FastAPI application with routes bound to ``machine``."""

    app = FastAPI(title="Vending Machine Control Panel", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    vending_machine = machine if machine is not None else _build_machine()

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the selection grid and the current balance."""

        snapshot = vending_machine.export_snapshot()
        LOGGER.debug("Rendering dashboard with balance %.2f", snapshot["amount_deposited"])
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "items": snapshot["items"],
                "amount_deposited": snapshot["amount_deposited"],
            },
        )

    @app.get("/inventory")
    async def inventory() -> JSONResponse:
        """Return the balance and every selection's stock."""

        return JSONResponse(vending_machine.export_snapshot())

    @app.get("/items/{selection}")
    async def item(selection: Selection) -> JSONResponse:
        """Return the stocked item for a selection."""

        stocked = vending_machine.item(selection)
        if stocked is None:
            raise HTTPException(status_code=404, detail=f"Selection {selection.value} is not stocked")
        return JSONResponse({"selection": selection.value, **stocked.as_dict()})

    @app.get("/icons/{selection}")
    async def icon(selection: Selection) -> FileResponse:
        """Serve the icon for a selection, or the default icon."""

        return FileResponse(icon_path(selection), media_type="image/svg+xml")

    @app.post("/deposit")
    async def deposit(amount: float = Form(...)) -> JSONResponse:
        """Add money to the machine's balance."""

        try:
            balance = vending_machine.deposit(amount)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        LOGGER.info("Deposit of %.2f accepted", amount)
        return JSONResponse({"amount_deposited": balance})

    @app.post("/vend")
    async def vend(
        selection: Selection = Form(...),
        quantity: int = Form(1),
    ) -> JSONResponse:
        """Vend a selection and return the receipt."""

        try:
            receipt = vending_machine.vend(selection, quantity)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        except InvalidSelection as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        except OutOfStock as error:
            raise HTTPException(
                status_code=409,
                detail={"message": str(error), "available": error.available},
            ) from error
        except InsufficientFunds as error:
            raise HTTPException(
                status_code=402,
                detail={"message": str(error), "required": error.required},
            ) from error
        return JSONResponse(receipt.as_dict())

    return app

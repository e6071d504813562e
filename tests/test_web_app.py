"""Mini README: Tests for the FastAPI control panel.

Routes are exercised through FastAPI's ``TestClient`` against a machine with
a small, known inventory so status codes and payloads are deterministic.
"""

from __future__ import annotations

import plistlib

import pytest
from fastapi.testclient import TestClient

from vendingsim.configuration import get_settings
from vendingsim.interface import create_application
from vendingsim.inventory import Item, Selection
from vendingsim.machine import VendingMachine


@pytest.fixture()
def client() -> TestClient:
    machine = VendingMachine(
        {
            Selection.SODA: Item(price=1.50, quantity=5),
            Selection.CHIPS: Item(price=2.00, quantity=10),
        },
        initial_balance=1.0,
    )
    return TestClient(create_application(machine))


def test_dashboard_renders_selections(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "soda" in response.text
    assert "Not stocked" in response.text


def test_inventory_and_item_lookup(client: TestClient) -> None:
    snapshot = client.get("/inventory").json()
    assert snapshot["amount_deposited"] == pytest.approx(1.0)
    assert len(snapshot["items"]) == 12

    assert client.get("/items/soda").json() == {"selection": "soda", "price": 1.5, "quantity": 5}
    assert client.get("/items/gum").status_code == 404
    assert client.get("/items/Soda").status_code == 422


def test_deposit_then_vend(client: TestClient) -> None:
    deposit = client.post("/deposit", data={"amount": "9"})
    assert deposit.status_code == 200
    assert deposit.json()["amount_deposited"] == pytest.approx(10.0)

    vend = client.post("/vend", data={"selection": "soda", "quantity": "3"})
    assert vend.status_code == 200
    assert vend.json() == {
        "selection": "soda",
        "quantity": 3,
        "total_price": 4.5,
        "remaining_balance": 5.5,
    }
    assert client.get("/items/soda").json()["quantity"] == 2


def test_vend_errors_map_to_status_codes(client: TestClient) -> None:
    shortfall = client.post("/vend", data={"selection": "chips", "quantity": "1"})
    assert shortfall.status_code == 402
    assert shortfall.json()["detail"]["required"] == pytest.approx(1.0)

    out_of_stock = client.post("/vend", data={"selection": "soda", "quantity": "6"})
    assert out_of_stock.status_code == 409
    assert out_of_stock.json()["detail"]["available"] == 5

    assert client.post("/vend", data={"selection": "gum"}).status_code == 404
    assert client.post("/vend", data={"selection": "soda", "quantity": "0"}).status_code == 400
    assert client.post("/vend", data={"selection": "pretzel"}).status_code == 422


def test_negative_deposit_is_rejected(client: TestClient) -> None:
    response = client.post("/deposit", data={"amount": "-2"})

    assert response.status_code == 400
    assert client.get("/inventory").json()["amount_deposited"] == pytest.approx(1.0)


def test_icons_fall_back_to_default(client: TestClient) -> None:
    soda = client.get("/icons/soda")
    wrap = client.get("/icons/wrap")

    assert soda.status_code == 200
    assert soda.headers["content-type"].startswith("image/svg+xml")
    assert "#c62828" in soda.text
    assert "?" in wrap.text


def test_application_seeds_from_configured_inventory(tmp_path, monkeypatch) -> None:
    seed = tmp_path / "stock.plist"
    seed.write_bytes(plistlib.dumps({"water": {"price": 1.0, "quantity": 3}}))
    monkeypatch.setenv("VENDINGSIM_INVENTORY_FILE", str(seed))
    monkeypatch.setenv("VENDINGSIM_INITIAL_BALANCE", "10")
    get_settings.cache_clear()
    try:
        client = TestClient(create_application())
        snapshot = client.get("/inventory").json()
    finally:
        get_settings.cache_clear()

    assert snapshot["amount_deposited"] == pytest.approx(10.0)
    stocked = [entry["selection"] for entry in snapshot["items"] if entry["stocked"]]
    assert stocked == ["water"]


def test_dashboard_forms_submit_through_panel_script(client: TestClient) -> None:
    """Forms are posted by ``panel.js`` so errors show on the panel itself."""

    page = client.get("/").text
    assert '<script src="/static/panel.js" defer></script>' in page
    assert page.count('class="panel-form"') == 3
    assert 'id="status"' in page

    script = client.get("/static/panel.js")
    assert script.status_code == 200
    assert "fetch(form.action" in script.text
    assert "window.location.reload()" in script.text

"""Mini README: Deposit/vend transaction state for a single vending machine.

Structure:
    * VendingMachineError - base class for failed transactions.
    * InvalidSelection / OutOfStock / InsufficientFunds - concrete failures.
    * VendReceipt - dataclass describing a completed vend.
    * VendingMachine - owns the inventory and the deposited balance.

A vend checks, in order, that the selection is stocked, that enough units
remain and that the balance covers the total price. The first failing check
is raised and nothing is mutated. All state changes happen under a per
machine lock so concurrent web requests cannot both pass the stock check
before either decrements it.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from ..inventory.models import Inventory, Item, Selection
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class VendingMachineError(Exception):
    """Raised when a vend cannot be completed; machine state is unchanged."""


class InvalidSelection(VendingMachineError):
    """The requested selection is not stocked by this machine."""

    def __init__(self, selection: Selection) -> None:
        super().__init__(f"Selection {selection.value} is not stocked")
        self.selection = selection


class OutOfStock(VendingMachineError):
    """Fewer units remain than were requested."""

    def __init__(self, selection: Selection, requested: int, available: int) -> None:
        super().__init__(
            f"Selection {selection.value} has {available} left, {requested} requested"
        )
        self.selection = selection
        self.requested = requested
        self.available = available


class InsufficientFunds(VendingMachineError):
    """The balance does not cover the total price; ``required`` is the shortfall."""

    def __init__(self, required: float) -> None:
        super().__init__(f"Insufficient funds, {required:.2f} more required")
        self.required = required


@dataclass(frozen=True, slots=True)
class VendReceipt:
    """Outcome of a successful vend."""

    selection: Selection
    quantity: int
    total_price: float
    remaining_balance: float

    def as_dict(self) -> Dict[str, object]:
        return {
            "selection": self.selection.value,
            "quantity": self.quantity,
            "total_price": self.total_price,
            "remaining_balance": self.remaining_balance,
        }


class VendingMachine:
    """Food vending machine holding an inventory and a deposited balance."""

    selections: Tuple[Selection, ...] = tuple(Selection)

    def __init__(self, inventory: Mapping[Selection, Item], *, initial_balance: float = 0.0) -> None:
        self._inventory: Inventory = {
            Selection.from_key(selection): item for selection, item in inventory.items()
        }
        self._amount_deposited = _validate_amount(initial_balance, label="Initial balance")
        self._lock = threading.Lock()
        LOGGER.debug(
            "Vending machine initialised with %s stocked selections and balance %.2f",
            len(self._inventory),
            self._amount_deposited,
        )

    @property
    def amount_deposited(self) -> float:
        return self._amount_deposited

    @property
    def inventory(self) -> Inventory:
        """Return a copy of the inventory; edits do not reach the machine."""

        with self._lock:
            return dict(self._inventory)

    def item(self, selection: Selection) -> Optional[Item]:
        """Return the stocked item for ``selection`` or ``None``."""

        return self._inventory.get(Selection.from_key(selection))

    def deposit(self, amount: float) -> float:
        """Add ``amount`` to the balance and return the new balance."""

        amount = _validate_amount(amount, label="Deposit")
        with self._lock:
            self._amount_deposited += amount
            balance = self._amount_deposited
        LOGGER.debug("Deposited %.2f, balance now %.2f", amount, balance)
        return balance

    def vend(self, selection: Selection, quantity: int = 1) -> VendReceipt:
        """Dispense ``quantity`` units of ``selection``, charging the balance.

        Raw names such as ``"soda"`` are accepted; names outside ``Selection``
        raise ``ValueError`` before the machine is touched.
        """

        selection = Selection.from_key(selection)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError(f"Vend quantity must be a positive integer, got {quantity!r}")

        with self._lock:
            item = self._inventory.get(selection)
            if item is None:
                LOGGER.debug("Rejected vend of unstocked selection %s", selection.value)
                raise InvalidSelection(selection)
            if item.quantity < quantity:
                LOGGER.debug(
                    "Rejected vend of %s x%s, only %s left", selection.value, quantity, item.quantity
                )
                raise OutOfStock(selection, quantity, item.quantity)
            total_price = item.price * quantity
            if self._amount_deposited < total_price:
                required = total_price - self._amount_deposited
                LOGGER.debug("Rejected vend of %s x%s, short by %.2f", selection.value, quantity, required)
                raise InsufficientFunds(required)

            self._amount_deposited -= total_price
            self._inventory[selection] = item.with_quantity(item.quantity - quantity)
            receipt = VendReceipt(
                selection=selection,
                quantity=quantity,
                total_price=total_price,
                remaining_balance=self._amount_deposited,
            )
        LOGGER.info(
            "Vended %s x%s for %.2f, balance now %.2f",
            selection.value,
            quantity,
            total_price,
            receipt.remaining_balance,
        )
        return receipt

    def export_snapshot(self) -> Dict[str, object]:
        """Export the balance and every selection for JSON responses."""

        with self._lock:
            balance = self._amount_deposited
            inventory = dict(self._inventory)
        items = []
        for selection in self.selections:
            item = inventory.get(selection)
            items.append(
                {
                    "selection": selection.value,
                    "price": item.price if item else None,
                    "quantity": item.quantity if item else 0,
                    "stocked": item is not None,
                }
            )
        return {"amount_deposited": balance, "items": items}


def _validate_amount(amount: float, *, label: str) -> float:
    """Return ``amount`` as a float, rejecting bools, non-numbers, NaN,
    infinities, integers too large for a float and negative amounts."""

    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise ValueError(f"{label} must be a number, got {amount!r}")
    try:
        value = float(amount)
    except OverflowError as error:
        raise ValueError(f"{label} is too large to represent") from error
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{label} must be a finite, non-negative amount, got {amount!r}")
    return value

"""Mini README: Vending machine transaction subsystem.

Re-exports the ``VendingMachine`` and its transaction error taxonomy so the
web interface and tests can import everything from one place.
"""

from .vending_machine import (
    InsufficientFunds,
    InvalidSelection,
    OutOfStock,
    VendingMachine,
    VendingMachineError,
    VendReceipt,
)

__all__ = [
    "InsufficientFunds",
    "InvalidSelection",
    "OutOfStock",
    "VendReceipt",
    "VendingMachine",
    "VendingMachineError",
]

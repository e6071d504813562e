"""Mini README: Inventory models and the seed-data loader.

``models`` defines the closed ``Selection`` enumeration and the ``Item``
record; ``loader`` turns a bundled property list (or any compatible document)
into the typed mapping a vending machine is constructed with.
"""

from .loader import (
    ConversionFailure,
    InvalidResource,
    InvalidSelection,
    InventoryError,
    dictionary_from_file,
    load_inventory,
    resource_path,
    vending_inventory,
)
from .models import Inventory, Item, Selection

__all__ = [
    "ConversionFailure",
    "InvalidResource",
    "InvalidSelection",
    "Inventory",
    "InventoryError",
    "Item",
    "Selection",
    "dictionary_from_file",
    "load_inventory",
    "resource_path",
    "vending_inventory",
]

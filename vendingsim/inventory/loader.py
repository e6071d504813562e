"""Mini README: Seed the typed inventory from an untyped resource document.

Structure:
    * InventoryError - base class for load-time failures.
    * InvalidResource / ConversionFailure / InvalidSelection - concrete errors.
    * resource_path - locate a document bundled in ``vendingsim/data``.
    * dictionary_from_file - parse a property list or JSON document.
    * vending_inventory - decode the raw dictionary into ``Inventory``.
    * load_inventory - convenience wrapper combining the steps above.

Decoding is deliberately asymmetric. A record whose value is not a
``{price, quantity}`` dictionary is skipped with a warning, while a well
formed record stored under a name outside ``Selection`` aborts the load.
"""

from __future__ import annotations

import json
import math
import plistlib
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from xml.parsers.expat import ExpatError

from ..logging_utils import get_logger
from .models import Inventory, Item, Selection

LOGGER = get_logger(__name__)

DEFAULT_RESOURCE_NAME = "VendingInventory"
DEFAULT_RESOURCE_EXTENSION = "plist"


class InventoryError(ValueError):
    """Raised when seed data cannot be turned into an inventory."""


class InvalidResource(InventoryError):
    """The seed document could not be found or read."""


class ConversionFailure(InventoryError):
    """The seed document is not a dictionary keyed by selection names."""


class InvalidSelection(InventoryError):
    """A record is keyed by a name outside the ``Selection`` enumeration."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Seed data contains unknown selection {key!r}")
        self.key = key


def resource_path(
    name: str = DEFAULT_RESOURCE_NAME, extension: str = DEFAULT_RESOURCE_EXTENSION
) -> Path:
    """Return the path of a resource shipped in the package data directory."""

    candidate = resources.files("vendingsim") / "data" / f"{name}.{extension}"
    path = Path(str(candidate))
    if not path.is_file():
        raise InvalidResource(f"Bundled resource {name}.{extension} not found")
    return path


def dictionary_from_file(path: Path) -> Dict[str, Any]:
    """Parse ``path`` as a property list, or as JSON when it ends in ``.json``."""

    path = Path(path)
    try:
        payload = path.read_bytes()
    except OSError as error:
        raise InvalidResource(f"Unable to read inventory resource {path}") from error

    try:
        if path.suffix.lower() == ".json":
            document = json.loads(payload)
        else:
            document = plistlib.loads(payload)
    except (
        # plistlib raises AttributeError for malformed <date> values.
        plistlib.InvalidFileException,
        ExpatError,
        ValueError,
        AttributeError,
        RecursionError,
    ) as error:
        raise ConversionFailure(f"Unable to parse inventory resource {path}") from error

    if not isinstance(document, dict) or not all(isinstance(key, str) for key in document):
        raise ConversionFailure(f"Inventory resource {path} is not a dictionary of selections")
    LOGGER.debug("Parsed %s raw inventory records from %s", len(document), path)
    return document


def _decode_item(value: Any) -> Optional[Item]:
    """Return an ``Item`` for a well formed record or ``None`` otherwise."""

    if not isinstance(value, Mapping):
        return None
    price = value.get("price")
    quantity = value.get("quantity")
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return None
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        return None
    try:
        price = float(price)
    except OverflowError:
        return None
    if not math.isfinite(price) or price < 0 or quantity < 0:
        return None
    return Item(price=price, quantity=quantity)


def vending_inventory(raw: Mapping[str, Any]) -> Inventory:
    """Decode raw seed records into a typed inventory."""

    inventory: Inventory = {}
    for key, value in raw.items():
        item = _decode_item(value)
        if item is None:
            LOGGER.warning("Skipping malformed inventory record %r: %r", key, value)
            continue
        try:
            selection = Selection.from_key(key)
        except ValueError as error:
            raise InvalidSelection(key) from error
        inventory[selection] = item
    return inventory


def load_inventory(path: Optional[Path] = None) -> Inventory:
    """Load and decode ``path``, defaulting to the bundled seed document."""

    source = Path(path) if path is not None else resource_path()
    inventory = vending_inventory(dictionary_from_file(source))
    LOGGER.info("Loaded %s stocked selections from %s", len(inventory), source)
    return inventory

"""Mini README: Typed inventory records shared by the loader and the machine.

Structure:
    * Selection - closed enumeration of every product a machine can stock.
    * Item - immutable price/quantity record for one selection.
    * Inventory - mapping alias from ``Selection`` to ``Item``.

Items are value objects: the machine never edits one in place, it stores a
replacement built with ``Item.with_quantity`` under the same selection key.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict


class Selection(str, Enum):
    """Product identifiers; values are the exact keys used in seed files."""

    SODA = "soda"
    DIET_SODA = "dietSoda"
    CHIPS = "chips"
    COOKIE = "cookie"
    SANDWICH = "sandwich"
    WRAP = "wrap"
    CANDY_BAR = "candyBar"
    POP_TART = "popTart"
    WATER = "water"
    FRUIT_JUICE = "fruitJuice"
    SPORTS_DRINK = "sportsDrink"
    GUM = "gum"

    @classmethod
    def from_key(cls, key: str) -> "Selection":
        """Match a raw key exactly; casing and whitespace are significant."""

        try:
            return cls(key)
        except ValueError as error:
            raise ValueError(f"Unknown selection: {key!r}") from error


@dataclass(frozen=True, slots=True)
class Item:
    """Price and remaining stock for a single selection."""

    price: float
    quantity: int

    def __post_init__(self) -> None:
        try:
            price = float(self.price)
        except OverflowError as error:
            raise ValueError("Item price is too large to represent") from error
        if not math.isfinite(price) or price < 0:
            raise ValueError(f"Item price must be a non-negative number, got {self.price}")
        if self.quantity < 0:
            raise ValueError(f"Item quantity must not be negative, got {self.quantity}")

    def with_quantity(self, quantity: int) -> "Item":
        return replace(self, quantity=quantity)

    def as_dict(self) -> Dict[str, object]:
        return {"price": self.price, "quantity": self.quantity}


Inventory = Dict[Selection, Item]

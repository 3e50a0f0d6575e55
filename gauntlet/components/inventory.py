"""
Inventory component - a small ordered bag of item names.
"""

from __future__ import annotations

from typing import Iterator

from pydantic import Field

from rpg_engine.core.component import Component
from rpg_engine.errors import InvalidAction, InvalidInput
from gauntlet.rules import INVENTORY_MAX_ITEMS, STARTING_ITEMS


class Inventory(Component):
    """
    Item container.

    Items are stored by name in pickup order; duplicates are allowed.

    Attributes:
        items: Item names in pickup order
        max_items: Capacity
    """
    items: list[str] = Field(default_factory=list)
    max_items: int = Field(default=INVENTORY_MAX_ITEMS, gt=0)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    @property
    def is_empty(self) -> bool:
        """Check if there is nothing to use."""
        return not self.items

    @property
    def is_full(self) -> bool:
        """Check if inventory is at capacity."""
        return len(self.items) >= self.max_items

    def add_item(self, item: str) -> bool:
        """
        Add an item.

        Returns:
            False if the inventory is full
        """
        if self.is_full:
            return False
        self.items.append(item)
        return True

    def get_item(self, index: int) -> str:
        """
        Get item name at a 0-based index.

        Raises:
            InvalidAction: Inventory is empty
            InvalidInput: Index outside current bounds
        """
        if self.is_empty:
            raise InvalidAction("Your inventory is empty!")
        if index < 0 or index >= len(self.items):
            raise InvalidInput("Invalid item selection!")
        return self.items[index]

    def remove_at(self, index: int) -> str:
        """Remove and return the item at a 0-based index."""
        self.get_item(index)
        return self.items.pop(index)

    def clear(self) -> None:
        """Remove all items."""
        self.items.clear()

    def reset(self) -> None:
        """Restore the starting kit."""
        self.items = list(STARTING_ITEMS)

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from hero_inventory.items.base import Item
from hero_inventory.items.equipment import Equippable

logger = logging.getLogger(__name__)

EMPTY_INVENTORY_MESSAGE = "Inventory is empty."


@dataclass(frozen=True)
class InventoryEntry:
    index: int
    description: str

    def line(self) -> str:
        return f"{self.index}: {self.description}"


@dataclass(frozen=True)
class InventoryListing:
    """Snapshot of an inventory for display: entries in index order."""

    entries: Tuple[InventoryEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def lines(self) -> List[str]:
        if self.is_empty:
            return [EMPTY_INVENTORY_MESSAGE]
        return [entry.line() for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class Inventory:
    """Ordered container that exclusively owns its items.

    - add: append an item (each instance at most once, arriving unequipped)
    - get: bounds-checked lookup, ``None`` when out of range
    - remove_at: drop the entry at an index, later entries shift down by one
    - index_of: position of an exact instance (identity, not equality)
    """

    _items: List[Item] = field(default_factory=list)

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))

    def __copy__(self):
        raise TypeError("Inventory owns its items and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Inventory owns its items and cannot be copied")

    def is_valid_index(self, index: object) -> bool:
        # Negative positions are never honoured: index 0 is always the oldest entry.
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < len(self._items)
        )

    def contains(self, item: Item) -> bool:
        return self.index_of(item) is not None

    def index_of(self, item: Item) -> Optional[int]:
        for i, held in enumerate(self._items):
            if held is item:
                return i
        return None

    def add(self, item: Item) -> bool:
        if self.contains(item):
            logger.warning("Item %s is already in the inventory; not adding it twice", item.name)
            return False
        if isinstance(item, Equippable) and item.equipped:
            # Only the owning player's slots mark items equipped.
            logger.debug("Clearing stale equipped flag on %s", item.name)
            item.equipped = False
        self._items.append(item)
        logger.debug("Added %s at index %d", item.name, len(self._items) - 1)
        return True

    def get(self, index: int) -> Optional[Item]:
        if not self.is_valid_index(index):
            return None
        return self._items[index]

    def remove_at(self, index: int) -> Optional[Item]:
        """Remove and return the entry at ``index``; ``None`` if out of range."""
        if not self.is_valid_index(index):
            logger.debug("remove_at: index %r out of range (size=%d)", index, len(self._items))
            return None
        item = self._items.pop(index)
        logger.debug("Removed %s from index %d", item.name, index)
        return item

    def clear(self) -> List[Item]:
        released = list(self._items)
        self._items.clear()
        return released

    def listing(self) -> InventoryListing:
        return InventoryListing(
            tuple(InventoryEntry(i, item.describe()) for i, item in enumerate(self))
        )


__all__ = ["EMPTY_INVENTORY_MESSAGE", "InventoryEntry", "InventoryListing", "Inventory"]

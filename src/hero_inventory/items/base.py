from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, Protocol

from hero_inventory.exceptions import InvalidItemError


class ItemKind(str, Enum):
    WEAPON = "Weapon"
    ARMOR = "Armor"
    POTION = "Potion"


class ItemOwner(Protocol):
    """Capabilities an item needs from whoever holds it when it is used.

    Equipping is type specific, so each equippable variant calls the matching
    ``equip_*`` method itself instead of the owner inspecting the item.
    """

    def equip_weapon(self, weapon) -> bool:
        ...

    def equip_armor(self, armor) -> bool:
        ...

    def add_health(self, delta: int) -> int:
        ...

    def consume_current_item(self, item: "Item") -> bool:
        ...


class Item(ABC):
    """Base inventory entry.

    Concrete items are dataclasses declared with ``eq=False`` so two items with
    the same name and stat remain distinct entries (identity equality).
    """

    kind: ClassVar[ItemKind]
    name: str

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable one-line description. No side effects."""

    @abstractmethod
    def use(self, owner: ItemOwner) -> None:
        """Apply this item's effect to ``owner``."""

    def __str__(self) -> str:
        return self.describe()


def require_name(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidItemError(f"Item name must be a non-empty string, got {name!r}")
    return name


def require_stat(label: str, value: object, minimum: int) -> int:
    # bool is an int subclass; "True" damage is a caller mistake
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidItemError(f"{label} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidItemError(f"{label} must be >= {minimum}, got {value}")
    return value


__all__ = ["ItemKind", "ItemOwner", "Item", "require_name", "require_stat"]

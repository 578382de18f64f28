from __future__ import annotations

from dataclasses import dataclass

from hero_inventory.items.base import Item, ItemKind, ItemOwner, require_name, require_stat


@dataclass(eq=False)
class Equippable(Item):
    """Item that occupies one of the owner's equip slots while in use."""

    name: str
    equipped: bool = False

    def is_equipped(self) -> bool:
        return self.equipped

    def _equipped_marker(self) -> str:
        return " (equipped)" if self.equipped else ""


@dataclass(eq=False)
class Weapon(Equippable):
    """Adds its damage to the owner's attack while equipped."""

    kind = ItemKind.WEAPON

    damage: int = 0

    def __init__(self, name: str, damage: int) -> None:
        super().__init__(name=require_name(name))
        self.damage = require_stat("damage", damage, 0)

    def describe(self) -> str:
        return f"{self.name} [{self.kind.value}] damage: {self.damage}{self._equipped_marker()}"

    def use(self, owner: ItemOwner) -> None:
        owner.equip_weapon(self)


@dataclass(eq=False)
class Armor(Equippable):
    """Adds its defense to the owner's defense while equipped."""

    kind = ItemKind.ARMOR

    defense: int = 0

    def __init__(self, name: str, defense: int) -> None:
        super().__init__(name=require_name(name))
        self.defense = require_stat("defense", defense, 0)

    def describe(self) -> str:
        return f"{self.name} [{self.kind.value}] defense: {self.defense}{self._equipped_marker()}"

    def use(self, owner: ItemOwner) -> None:
        owner.equip_armor(self)


__all__ = ["Equippable", "Weapon", "Armor"]

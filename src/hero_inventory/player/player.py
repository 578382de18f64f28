from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from hero_inventory.items.base import Item
from hero_inventory.items.equipment import Armor, Equippable, Weapon
from hero_inventory.player.inventory import Inventory, InventoryListing

logger = logging.getLogger(__name__)

MIN_HEALTH = 0
MAX_HEALTH = 100
DEFAULT_BASE_ATTACK = 5
DEFAULT_BASE_DEFENSE = 2


def clamp_health(value: int) -> int:
    return max(MIN_HEALTH, min(MAX_HEALTH, value))


@dataclass(eq=False)
class Player:
    """Player model: health, base combat stats, an inventory and two equip slots.

    Equip slots hold inventory indices rather than item references. Removing
    an entry clears the slot pointing at it and shifts slots pointing past it,
    so a slot can never refer to an item the inventory no longer owns.
    Derived stats are base values plus the equipped weapon's damage / armor's
    defense.
    """

    name: str
    health: int = MAX_HEALTH
    base_attack: int = DEFAULT_BASE_ATTACK
    base_defense: int = DEFAULT_BASE_DEFENSE
    inventory: Inventory = field(default_factory=Inventory)

    _weapon_slot: Optional[int] = field(default=None, init=False, repr=False)
    _armor_slot: Optional[int] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.health = clamp_health(self.health)
        logger.debug("Initialized player %s with health=%s", self.name, self.health)

    def __copy__(self):
        raise TypeError("Player owns its inventory and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Player owns its inventory and cannot be copied")

    # ---- Health ----
    def add_health(self, delta: int) -> int:
        """Adjust health by ``delta`` (may be negative), clamped to [0, 100]."""
        before = self.health
        self.health = clamp_health(self.health + delta)
        logger.debug("%s health %d -> %d (delta %+d)", self.name, before, self.health, delta)
        return self.health

    # ---- Derived stats ----
    @property
    def equipped_weapon(self) -> Optional[Weapon]:
        return self._slot_item(self._weapon_slot, Weapon)

    @property
    def equipped_armor(self) -> Optional[Armor]:
        return self._slot_item(self._armor_slot, Armor)

    def attack(self) -> int:
        weapon = self.equipped_weapon
        return self.base_attack + (weapon.damage if weapon is not None else 0)

    def defense(self) -> int:
        armor = self.equipped_armor
        return self.base_defense + (armor.defense if armor is not None else 0)

    # ---- Inventory ----
    def add_item(self, item: Item) -> bool:
        """Take ownership of ``item`` and append it to the inventory."""
        added = self.inventory.add(item)
        if added:
            logger.debug("%s picked up %s", self.name, item.name)
        return added

    def items(self) -> Tuple[Item, ...]:
        return self.inventory.items

    def inventory_size(self) -> int:
        return len(self.inventory)

    def list_items(self) -> InventoryListing:
        return self.inventory.listing()

    def get_item(self, index: int) -> Optional[Item]:
        return self.inventory.get(index)

    def remove_item_by_index(self, index: int) -> bool:
        """Remove and release the item at ``index``.

        Returns False (and changes nothing) when the index is out of range.
        """
        if not self.inventory.is_valid_index(index):
            logger.debug("%s: no item at index %r to remove", self.name, index)
            return False
        self._release_slots_for(index)
        item = self.inventory.remove_at(index)
        logger.debug("%s discarded %s", self.name, item.name)
        return True

    def use_item(self, index: int) -> bool:
        """Use the item at ``index`` on this player.

        Weapons and armor equip themselves; potions heal and are consumed.
        Returns False when the index is out of range.
        """
        item = self.get_item(index)
        if item is None:
            logger.debug("%s: no item at index %r to use", self.name, index)
            return False
        logger.debug("%s uses %s", self.name, item.name)
        item.use(self)
        return True

    def consume_current_item(self, item: Item) -> bool:
        """Remove the exact ``item`` instance from the inventory, if held."""
        index = self.inventory.index_of(item)
        if index is None:
            return False
        return self.remove_item_by_index(index)

    def discard_all(self) -> int:
        """Clear both equip slots, then release every owned item. Returns the count released."""
        for item in (self.equipped_weapon, self.equipped_armor):
            if item is not None:
                item.equipped = False
        self._weapon_slot = None
        self._armor_slot = None
        released = self.inventory.clear()
        logger.debug("%s released %d items", self.name, len(released))
        return len(released)

    # ---- Equipment ----
    def equip_weapon(self, weapon: Weapon) -> bool:
        if not isinstance(weapon, Weapon):
            logger.warning("%s cannot equip %s as a weapon", self.name, getattr(weapon, "name", weapon))
            return False
        index = self._index_for_equip(weapon)
        if index is None:
            return False
        previous = self.equipped_weapon
        if previous is not None:
            previous.equipped = False
        self._weapon_slot = index
        weapon.equipped = True
        logger.info("%s equipped %s. Attack is now %d", self.name, weapon.name, self.attack())
        return True

    def equip_armor(self, armor: Armor) -> bool:
        if not isinstance(armor, Armor):
            logger.warning("%s cannot equip %s as armor", self.name, getattr(armor, "name", armor))
            return False
        index = self._index_for_equip(armor)
        if index is None:
            return False
        previous = self.equipped_armor
        if previous is not None:
            previous.equipped = False
        self._armor_slot = index
        armor.equipped = True
        logger.info("%s equipped %s. Defense is now %d", self.name, armor.name, self.defense())
        return True

    def status(self) -> str:
        weapon = self.equipped_weapon
        armor = self.equipped_armor
        return (
            f"{self.name} | HP {self.health}/{MAX_HEALTH} | ATK {self.attack()} | DEF {self.defense()}"
            f" | Weapon: {weapon.name if weapon else '-'} | Armor: {armor.name if armor else '-'}"
        )

    # ---- Helpers ----
    def _index_for_equip(self, item: Equippable) -> Optional[int]:
        index = self.inventory.index_of(item)
        if index is None:
            logger.warning("%s cannot equip %s: it is not in the inventory", self.name, item.name)
        return index

    def _slot_item(self, slot: Optional[int], expected: type) -> Optional[Equippable]:
        if slot is None:
            return None
        item = self.inventory.get(slot)
        if isinstance(item, expected) and item.equipped:
            return item
        # Slot no longer matches the inventory; treat as empty.
        logger.debug("%s: stale equip slot %r ignored", self.name, slot)
        return None

    def _release_slots_for(self, index: int) -> None:
        """Keep slots aligned with the inventory before the entry at ``index`` is removed."""
        for attr in ("_weapon_slot", "_armor_slot"):
            slot = getattr(self, attr)
            if slot is None:
                continue
            if slot == index:
                item = self.inventory.get(slot)
                if isinstance(item, Equippable):
                    item.equipped = False
                setattr(self, attr, None)
            elif slot > index:
                setattr(self, attr, slot - 1)


__all__ = ["MIN_HEALTH", "MAX_HEALTH", "DEFAULT_BASE_ATTACK", "DEFAULT_BASE_DEFENSE", "clamp_health", "Player"]

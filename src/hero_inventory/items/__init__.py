"""
Item taxonomy: weapons, armor and potions.

Provides:
- ``Item`` abstract base and the ``ItemOwner`` capability protocol
- ``Weapon`` / ``Armor`` equippable variants and the ``Potion`` consumable
- ``create_item`` / ``item_from_dict`` validated constructors
"""

from hero_inventory.items.base import Item, ItemKind, ItemOwner
from hero_inventory.items.consumables import Potion
from hero_inventory.items.equipment import Armor, Equippable, Weapon
from hero_inventory.items.factory import create_item, item_from_dict, parse_kind

__all__ = [
    "Item",
    "ItemKind",
    "ItemOwner",
    "Equippable",
    "Weapon",
    "Armor",
    "Potion",
    "create_item",
    "item_from_dict",
    "parse_kind",
]

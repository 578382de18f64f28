from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Type, Union

from hero_inventory.exceptions import InvalidItemError
from hero_inventory.items.base import Item, ItemKind
from hero_inventory.items.consumables import Potion
from hero_inventory.items.equipment import Armor, Weapon

logger = logging.getLogger(__name__)

ITEM_CLASSES: Dict[ItemKind, Type[Item]] = {
    ItemKind.WEAPON: Weapon,
    ItemKind.ARMOR: Armor,
    ItemKind.POTION: Potion,
}

# Name of the stat each kind takes, and the smallest value it accepts
STAT_FIELDS: Dict[ItemKind, str] = {
    ItemKind.WEAPON: "damage",
    ItemKind.ARMOR: "defense",
    ItemKind.POTION: "heal",
}
STAT_MINIMUMS: Dict[ItemKind, int] = {
    ItemKind.WEAPON: 0,
    ItemKind.ARMOR: 0,
    ItemKind.POTION: 1,
}


def parse_kind(kind: Union[ItemKind, str]) -> ItemKind:
    """Resolve an ItemKind from a member or its (case-insensitive) name/value."""
    if isinstance(kind, ItemKind):
        return kind
    if isinstance(kind, str):
        wanted = kind.strip().lower()
        for member in ItemKind:
            if wanted in (member.value.lower(), member.name.lower()):
                return member
    raise InvalidItemError(f"Unknown item type: {kind!r}")


def create_item(kind: Union[ItemKind, str], name: str, stat: int) -> Item:
    """Construct the variant for ``kind`` with its single stat value.

    Raises:
        InvalidItemError: unknown kind, blank name or out-of-range stat.
    """
    resolved = parse_kind(kind)
    item = ITEM_CLASSES[resolved](name, stat)
    logger.debug("Created %s", item.describe())
    return item


def item_from_dict(data: Mapping[str, Any]) -> Item:
    """Create an item from a mapping such as a settings file entry.

    Accepted shapes::

        {"type": "Weapon", "name": "Sword", "stat": 10}
        {"type": "Potion", "name": "Tonic", "heal": 5}
    """
    if not isinstance(data, Mapping):
        raise InvalidItemError(f"Item entry must be a mapping, got {data!r}")
    if "type" not in data:
        raise InvalidItemError(f"Item entry is missing 'type': {dict(data)!r}")
    kind = parse_kind(data["type"])
    stat_field = STAT_FIELDS[kind]
    if "stat" in data:
        stat = data["stat"]
    elif stat_field in data:
        stat = data[stat_field]
    else:
        raise InvalidItemError(f"{kind.value} entry needs 'stat' or '{stat_field}': {dict(data)!r}")
    return create_item(kind, data.get("name", ""), stat)


__all__ = [
    "ITEM_CLASSES",
    "STAT_FIELDS",
    "STAT_MINIMUMS",
    "parse_kind",
    "create_item",
    "item_from_dict",
]

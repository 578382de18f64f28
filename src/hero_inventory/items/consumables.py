from __future__ import annotations

import logging
from dataclasses import dataclass

from hero_inventory.items.base import Item, ItemKind, ItemOwner, require_name, require_stat

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Potion(Item):
    """Single-use item: heals the owner, then is removed from the owner's inventory."""

    kind = ItemKind.POTION

    name: str
    heal: int

    def __post_init__(self) -> None:
        require_name(self.name)
        require_stat("heal", self.heal, 1)

    def describe(self) -> str:
        return f"{self.name} [{self.kind.value}] heals: {self.heal}"

    def use(self, owner: ItemOwner) -> None:
        # Heal before consuming; consumption drops the owner's last reference.
        owner.add_health(self.heal)
        if not owner.consume_current_item(self):
            logger.debug("Potion %s was not held by its user; nothing consumed", self.name)


__all__ = ["Potion"]

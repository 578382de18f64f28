from hero_inventory.player.inventory import Inventory, InventoryEntry, InventoryListing
from hero_inventory.player.player import MAX_HEALTH, Player

__all__ = ["Inventory", "InventoryEntry", "InventoryListing", "MAX_HEALTH", "Player"]

from hero_inventory.ui.console import Console
from hero_inventory.ui.menu import InventoryMenu

__all__ = ["Console", "InventoryMenu"]

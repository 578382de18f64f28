from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from hero_inventory.exceptions import InvalidItemError
from hero_inventory.items.base import ItemKind
from hero_inventory.items.factory import STAT_FIELDS, STAT_MINIMUMS, create_item
from hero_inventory.player.player import Player
from hero_inventory.ui.console import Console

logger = logging.getLogger(__name__)

INVALID_INDEX_MESSAGE = "Invalid item index."


@dataclass(frozen=True)
class MenuItem:
    """A single menu option.

    Attributes:
        key: Text the user types to pick the option.
        id: Stable identifier used by the dispatch table.
        label: Human-friendly text displayed in the menu.
    """
    key: str
    id: str
    label: str


MENU_ITEMS: List[MenuItem] = [
    MenuItem("1", "add_weapon", "Add weapon"),
    MenuItem("2", "add_armor", "Add armor"),
    MenuItem("3", "add_potion", "Add potion"),
    MenuItem("4", "list", "List inventory"),
    MenuItem("5", "use", "Use item"),
    MenuItem("6", "remove", "Remove item"),
    MenuItem("7", "status", "Show status"),
    MenuItem("0", "quit", "Quit"),
]


class InventoryMenu:
    """Text menu that drives a Player through a Console.

    The menu only calls the player's public operations; all user-facing text
    is produced here.
    """

    def __init__(self, player: Player, console: Optional[Console] = None) -> None:
        self.player = player
        self.console = console or Console()
        self.running = False
        self._handlers: Dict[str, Callable[[], None]] = {
            "add_weapon": lambda: self._add_item(ItemKind.WEAPON),
            "add_armor": lambda: self._add_item(ItemKind.ARMOR),
            "add_potion": lambda: self._add_item(ItemKind.POTION),
            "list": self._list_items,
            "use": self._use_item,
            "remove": self._remove_item,
            "status": self._show_status,
            "quit": self._quit,
        }

    def render_menu(self) -> List[str]:
        return [f"{m.key}) {m.label}" for m in MENU_ITEMS]

    def find(self, key: str) -> Optional[MenuItem]:
        for m in MENU_ITEMS:
            if m.key == key:
                return m
        return None

    def run(self) -> int:
        """Loop until Quit or end of input. Returns the number of commands handled."""
        self.running = True
        handled = 0
        self.console.write(f"Welcome, {self.player.name}!")
        try:
            while self.running:
                self.console.write("")
                for line in self.render_menu():
                    self.console.write(line)
                choice = self.console.ask("> ")
                if self.handle(choice):
                    handled += 1
        except EOFError:
            logger.debug("End of input; leaving menu")
            self._quit()
        return handled

    def handle(self, choice: str) -> bool:
        """Dispatch a single menu choice. Returns False for unknown choices."""
        item = self.find(choice.strip())
        if item is None:
            self.console.write(f"Unknown option: {choice!r}")
            return False
        logger.debug("Menu choice: %s", item.id)
        self._handlers[item.id]()
        return True

    # ---- Commands ----

    def _add_item(self, kind: ItemKind) -> None:
        stat_field = STAT_FIELDS[kind]
        name = self.console.ask_text(f"{kind.value} name: ")
        stat = self.console.ask_int(f"{stat_field.capitalize()}: ", minimum=STAT_MINIMUMS[kind])
        try:
            item = create_item(kind, name, stat)
        except InvalidItemError as e:
            self.console.write(f"Could not create item: {e}")
            return
        self.player.add_item(item)
        self.console.write(f"Added {item.describe()}")

    def _list_items(self) -> None:
        for line in self.player.list_items().lines():
            self.console.write(line)

    def _ask_index(self, verb: str) -> Optional[int]:
        listing = self.player.list_items()
        for line in listing.lines():
            self.console.write(line)
        if listing.is_empty:
            return None
        return self.console.ask_int(f"Index to {verb}: ")

    def _use_item(self) -> None:
        index = self._ask_index("use")
        if index is None:
            return
        item = self.player.get_item(index)
        if not self.player.use_item(index):
            self.console.write(INVALID_INDEX_MESSAGE)
            return
        self.console.write(f"Used {item.name}.")
        self._show_status()

    def _remove_item(self) -> None:
        index = self._ask_index("remove")
        if index is None:
            return
        item = self.player.get_item(index)
        if not self.player.remove_item_by_index(index):
            self.console.write(INVALID_INDEX_MESSAGE)
            return
        self.console.write(f"Removed {item.name}.")

    def _show_status(self) -> None:
        self.console.write(self.player.status())

    def _quit(self) -> None:
        released = self.player.discard_all()
        logger.debug("Released %d items on quit", released)
        self.console.write("Goodbye!")
        self.running = False


__all__ = ["INVALID_INDEX_MESSAGE", "MenuItem", "MENU_ITEMS", "InventoryMenu"]

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config.settings import Settings
from .exceptions import SettingsError
from .ui.console import Console
from .ui.menu import InventoryMenu

logger = logging.getLogger(__name__)


# -v count -> root level; anything past -vv stays at DEBUG
VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def _setup_logging(verbosity: int) -> None:
    level = VERBOSITY_LEVELS[min(max(verbosity, 0), len(VERBOSITY_LEVELS) - 1)]
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hero-inventory",
        description="Hero Inventory - console RPG inventory demo",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--name", default=None, help="Player name (overrides settings)")
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file overlaid on the defaults")
    parser.add_argument(
        "--no-starting-items",
        action="store_true",
        help="Start with an empty inventory instead of the configured starting items",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        settings = Settings.load(args.config)
    except SettingsError as e:
        logger.error("Could not load settings: %s", e)
        return 2

    # Honor CLI over settings file
    if args.name:
        settings.player.name = args.name
    player = settings.create_player(include_starting_items=not args.no_starting_items)

    menu = InventoryMenu(player, Console())
    try:
        handled = menu.run()
    except KeyboardInterrupt:
        player.discard_all()
        print("\nInterrupted by user")
        return 130
    logger.info("Session finished after %d commands", handled)
    return 0


if __name__ == "__main__":
    sys.exit(main())

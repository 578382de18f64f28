from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from hero_inventory.exceptions import InvalidItemError, SettingsError
from hero_inventory.items.base import Item
from hero_inventory.items.factory import item_from_dict
from hero_inventory.player.player import (
    DEFAULT_BASE_ATTACK,
    DEFAULT_BASE_DEFENSE,
    MAX_HEALTH,
    Player,
)

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_RESOURCE = "default_settings.yaml"


@dataclass
class PlayerSettings:
    name: str = "Hero"
    health: int = MAX_HEALTH
    base_attack: int = DEFAULT_BASE_ATTACK
    base_defense: int = DEFAULT_BASE_DEFENSE


@dataclass
class Settings:
    player: PlayerSettings = field(default_factory=PlayerSettings)
    # Raw item entries; built into fresh Item instances per player
    starting_items: List[Dict[str, Any]] = field(default_factory=list)

    @staticmethod
    def _parse_yaml(text: str, source: str) -> dict:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML in {source}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise SettingsError(f"Settings in {source} must be a mapping, got {type(data).__name__}")
        return data

    @classmethod
    def _load_yaml(cls, path: Path) -> dict:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SettingsError(f"Cannot read settings file {path}: {e}") from e
        return cls._parse_yaml(text, str(path))

    @classmethod
    def _overlay(cls, defaults: dict, overrides: dict) -> dict:
        """Return ``defaults`` updated with ``overrides``; nested sections merge key by key.

        Lists such as ``starting_items`` are replaced wholesale.
        """
        result = dict(defaults)
        for key, value in (overrides or {}).items():
            section = defaults.get(key)
            if isinstance(value, dict) and isinstance(section, dict):
                result[key] = cls._overlay(section, value)
            else:
                result[key] = value
        return result

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        player_data = data.get("player") or {}
        if not isinstance(player_data, dict):
            raise SettingsError("'player' settings must be a mapping")
        known = {f.name for f in dataclasses.fields(PlayerSettings)}
        unknown = set(player_data) - known
        if unknown:
            raise SettingsError(f"Unknown player settings: {', '.join(sorted(unknown))}")
        player = PlayerSettings(**player_data)
        if not isinstance(player.name, str) or not player.name.strip():
            raise SettingsError("player.name must be a non-empty string")
        for key in ("health", "base_attack", "base_defense"):
            value = getattr(player, key)
            if isinstance(value, bool) or not isinstance(value, int):
                raise SettingsError(f"player.{key} must be an integer, got {value!r}")

        items = data.get("starting_items") or []
        if not isinstance(items, list):
            raise SettingsError("'starting_items' must be a list")
        if not all(isinstance(entry, dict) for entry in items):
            raise SettingsError("Every starting item must be a mapping")
        settings = Settings(player=player, starting_items=[dict(entry) for entry in items])
        # Validate entries up front so a bad file fails at load time.
        settings.build_starting_items()
        return settings

    @classmethod
    def _packaged_defaults(cls) -> dict:
        resource = resources.files("hero_inventory.config").joinpath(DEFAULT_SETTINGS_RESOURCE)
        try:
            return cls._parse_yaml(resource.read_text(encoding="utf-8"), DEFAULT_SETTINGS_RESOURCE)
        except FileNotFoundError:
            logger.warning("Packaged %s missing; using built-in player defaults", DEFAULT_SETTINGS_RESOURCE)
            return dataclasses.asdict(Settings())

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Build settings for a new game.

        The packaged ``default_settings.yaml`` supplies every value; a user file,
        when given, overrides individual player fields or replaces the starting
        item list. A user path that does not exist is reported and ignored.
        """
        data = cls._packaged_defaults()
        if user_path is not None and not user_path.exists():
            logger.warning("Settings file %s does not exist; keeping defaults", user_path)
        elif user_path is not None:
            data = cls._overlay(data, cls._load_yaml(user_path))
            logger.info("Applied settings from %s", user_path)

        settings = cls._from_dict(data)
        logger.debug("Player settings: %s, %d starting items", settings.player, len(settings.starting_items))
        return settings

    def build_starting_items(self) -> List[Item]:
        try:
            return [item_from_dict(entry) for entry in self.starting_items]
        except InvalidItemError as e:
            raise SettingsError(f"Invalid starting item: {e}") from e

    def create_player(self, include_starting_items: bool = True) -> Player:
        player = Player(
            name=self.player.name,
            health=self.player.health,
            base_attack=self.player.base_attack,
            base_defense=self.player.base_defense,
        )
        if include_starting_items:
            for item in self.build_starting_items():
                player.add_item(item)
        logger.info("Created player %s with %d starting items", player.name, player.inventory_size())
        return player


__all__ = ["PlayerSettings", "Settings"]

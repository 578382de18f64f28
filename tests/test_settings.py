from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from hero_inventory.config import PlayerSettings, Settings
from hero_inventory.exceptions import SettingsError
from hero_inventory.items import Potion, Weapon


def write_yaml(tmp_path: Path, content: str) -> Path:
    fp = tmp_path / "settings.yaml"
    fp.write_text(textwrap.dedent(content), encoding="utf-8")
    return fp


def test_packaged_defaults() -> None:
    s = Settings.load()
    assert s.player == PlayerSettings(name="Hero", health=100, base_attack=5, base_defense=2)
    assert [entry["name"] for entry in s.starting_items] == ["Wooden Sword", "Small Tonic"]


def test_default_player_gets_starting_items() -> None:
    p = Settings.load().create_player()
    assert p.name == "Hero"
    assert p.inventory_size() == 2
    assert isinstance(p.get_item(0), Weapon)
    assert isinstance(p.get_item(1), Potion)
    assert p.attack() == 5


def test_create_player_without_starting_items() -> None:
    p = Settings.load().create_player(include_starting_items=False)
    assert p.inventory_size() == 0


def test_each_player_gets_fresh_items() -> None:
    s = Settings.load()
    a = s.create_player()
    b = s.create_player()
    assert a.get_item(0) is not b.get_item(0)


def test_user_file_overlays_defaults(tmp_path: Path) -> None:
    fp = write_yaml(
        tmp_path,
        """
        player:
          name: Aria
          base_attack: 7
        starting_items:
          - {type: Armor, name: Cloak, defense: 1}
        """,
    )
    s = Settings.load(fp)
    assert s.player.name == "Aria"
    assert s.player.base_attack == 7
    # Untouched keys keep their defaults
    assert s.player.base_defense == 2
    assert s.player.health == 100
    p = s.create_player()
    assert p.attack() == 7
    assert [item.name for item in p.items()] == ["Cloak"]


def test_missing_user_file_warns_and_keeps_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING"):
        s = Settings.load(tmp_path / "nope.yaml")
    assert s.player.name == "Hero"
    assert any("does not exist" in rec.message for rec in caplog.records)


def test_empty_user_file_keeps_defaults(tmp_path: Path) -> None:
    fp = write_yaml(tmp_path, "")
    assert Settings.load(fp).player.name == "Hero"


@pytest.mark.parametrize(
    "content",
    [
        "player: [1, 2\n",
        "- just\n- a list\n",
        "player: nope\n",
        "player:\n  mana: 3\n",
        "player:\n  name: ''\n",
        "player:\n  health: lots\n",
        "starting_items: {type: Weapon}\n",
        "starting_items:\n  - Sword\n",
        "starting_items:\n  - {type: Weapon, name: Sword, stat: -1}\n",
        "starting_items:\n  - {type: Shield, name: Buckler, stat: 1}\n",
    ],
)
def test_invalid_settings_raise(tmp_path: Path, content: str) -> None:
    fp = write_yaml(tmp_path, content)
    with pytest.raises(SettingsError):
        Settings.load(fp)

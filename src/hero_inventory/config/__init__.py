from hero_inventory.config.settings import PlayerSettings, Settings

__all__ = ["PlayerSettings", "Settings"]

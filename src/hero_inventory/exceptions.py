class HeroInventoryError(Exception):
    """Base exception for the hero-inventory project."""


class InvalidItemError(HeroInventoryError, ValueError):
    """Raised when an item is constructed with a blank name or an out-of-range stat."""


class SettingsError(HeroInventoryError):
    """Raised when a settings file cannot be read or describes invalid values."""

"""
Hero Inventory package root.

A console role-playing-game inventory: a player who acquires, lists, equips,
uses and removes weapons, armor and potions. Domain modules (``items``,
``player``) hold no console code; ``ui`` and ``__main__`` drive them.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]

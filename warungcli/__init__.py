"""Terminal food-ordering menu with a catalogue, search, cart and checkout."""

__version__ = "0.1.0"
__all__ = ["catalog", "console", "cart", "menu"]
"""Dead Man's Draw++: a two-player push-your-luck pirate card game."""

__version__ = "0.1.0"
__all__ = ["cards", "piles", "player", "game"]
"""Turn-based monster battle mini-game."""
__version__ = "0.1.0"

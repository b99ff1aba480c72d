"""Daily wallet balance tracking for a fixed list of explorer addresses."""

__version__ = "0.1.0"

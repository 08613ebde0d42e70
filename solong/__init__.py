"""Map loading, validation and path checking for a tile-based puzzle game, with text and buffer helpers."""

__version__ = "1.0.0"
"""Map loading, validation and drawing for a tile-based puzzle game, with text and buffer helpers."""

__version__ = "0.1.0"
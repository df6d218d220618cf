"""A small pygame arcade sandbox with a paddle, sprites, a clock and a jukebox."""

__version__ = "0.1.0"

__all__ = ["audio", "game", "mouse", "player", "textures", "timing", "window"]
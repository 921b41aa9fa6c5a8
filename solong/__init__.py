"""Tile-map route checking, colour conversion, in-memory images, X11 colour names and XPM reading."""

__version__ = "0.1.0"
__all__ = ["colors", "image", "rgb_names", "route", "wordtab", "xpm"]
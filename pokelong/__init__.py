"""Tile-based collect-and-escape puzzle game played on .ber maps, with XPM texture loading."""

__version__ = "0.1.0"
__all__ = ["__version__"]
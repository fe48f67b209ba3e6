"""KidMap: kid-friendly places on a map, with per-user favorites."""

__version__ = "1.0.0"

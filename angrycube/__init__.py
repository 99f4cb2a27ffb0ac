"""A rolling-cube puzzle game: keep Mr. Angry Cube calm by squashing enemies."""

__version__ = "0.1.0"
__all__ = ["__version__"]
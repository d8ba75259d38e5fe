"""Parse SVG documents into shapes made of cubic Bezier paths."""

__version__ = "1.0.0"
__all__ = ["__version__"]
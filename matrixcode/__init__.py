"""Data Matrix symbol tables, Reed-Solomon coding, 2D geometry, scan grids and timeouts."""

__version__ = "0.1.0"
__all__ = ["reedsol", "scangrid", "symbol", "timing", "vector2"]
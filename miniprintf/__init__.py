"""A small printf-style formatter with c, s, p, d, i, u, x, X and % conversions."""

__version__ = "0.1.0"
__all__ = ["conversions", "printf"]
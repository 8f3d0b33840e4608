"""Copy-on-write little-endian integer arrays and the 64-bit Fx hash."""

__version__ = "0.1.0"
__all__ = ["cow_array", "fxhash"]
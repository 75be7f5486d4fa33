"""Pure-Python Blowfish block cipher; see the blowfish module."""

__version__ = "0.1.0"
__all__ = ["blowfish"]
"""Configurable binary/octal/decimal/hex dumps of byte streams."""

__version__ = "0.1.0"

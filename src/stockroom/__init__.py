"""Stockroom - inventory and sales back office authorization core."""

__version__ = "0.1.0"

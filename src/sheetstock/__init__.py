"""Inventory and cut-allocation engine for rigid sheet stock."""

__version__ = "1.0.0"

"""Scroll Selector - pick list items by scrolling, driven by a smooth selection ratio."""

__version__ = "0.1.0"

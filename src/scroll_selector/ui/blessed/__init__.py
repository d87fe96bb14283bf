"""Blessed terminal demo of scroll-to-select."""

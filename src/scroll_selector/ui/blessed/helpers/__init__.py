"""Blessed UI helper functions."""

from .terminal import fit_width, write_at
from .scrolling import clamp_scroll_offset, ratio_to_row, scrollbar_thumb

__all__ = [
    "write_at",
    "fit_width",
    "clamp_scroll_offset",
    "ratio_to_row",
    "scrollbar_thumb",
]

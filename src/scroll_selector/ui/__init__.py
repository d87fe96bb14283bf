"""UI layer for Scroll Selector.

Contains:
- blessed: Full-screen terminal demo of scroll-to-select
"""

__all__ = []

"""Keyboard event handling for the demo."""

from .keyboard import KeyAction, parse_key

__all__ = ["KeyAction", "parse_key"]

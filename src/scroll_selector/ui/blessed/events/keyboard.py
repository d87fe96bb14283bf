"""Keyboard event parsing for the demo."""

from dataclasses import dataclass

from blessed.keyboard import Keystroke


@dataclass(frozen=True)
class KeyAction:
    """Action requested by a key press.

    type: "scroll" | "top" | "bottom" | "help" | "quit" | "none"
    amount: Scroll delta in rows (scroll actions only)
    """

    type: str
    amount: int = 0


def parse_key(key: Keystroke, scroll_step: int, page_size: int) -> KeyAction:
    """
    Map a keystroke to a demo action.

    Args:
        key: blessed Keystroke
        scroll_step: Rows scrolled by a single line step
        page_size: Rows scrolled by a page step

    Returns:
        KeyAction describing what to do
    """
    name = key.name if hasattr(key, "name") else None
    char = str(key) if key and key.isprintable() else None

    if name == "KEY_UP" or char == "k":
        return KeyAction("scroll", -scroll_step)
    if name == "KEY_DOWN" or char == "j":
        return KeyAction("scroll", scroll_step)
    if name == "KEY_PGUP" or key == "\x15":  # Ctrl+U
        return KeyAction("scroll", -page_size)
    if name == "KEY_PGDOWN" or key == "\x04":  # Ctrl+D
        return KeyAction("scroll", page_size)
    if name == "KEY_HOME" or char == "g":
        return KeyAction("top")
    if name == "KEY_END" or char == "G":
        return KeyAction("bottom")
    if char == "?":
        return KeyAction("help")
    if name == "KEY_ESCAPE" or char == "q" or key == "\x03":
        return KeyAction("quit")
    return KeyAction("none")

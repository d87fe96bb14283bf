"""Demo UI components."""

from .list_view import build_rows, render_list
from .status import format_status, render_status

__all__ = ["build_rows", "render_list", "format_status", "render_status"]

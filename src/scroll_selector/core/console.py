"""Rich console shared by the CLI commands."""

from rich.console import Console
from rich.table import Table

_console: Console | None = None


def get_console() -> Console:
    global _console
    if _console is None:
        _console = Console()
    return _console


def numeric_table(title: str, columns: list[str]) -> Table:
    """Build a table whose columns are all right-aligned numbers."""
    table = Table(title=title)
    for column in columns:
        table.add_column(column, justify="right")
    return table


def print_error(message: str) -> None:
    get_console().print(f"Error: {message}", style="bold red", highlight=False)


def print_success(message: str) -> None:
    get_console().print(message, style="green", highlight=False)

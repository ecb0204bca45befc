"""Rich renderables for the calculator display, history and key bindings."""

from typing import Dict, List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .accumulator import Accumulator
from .history import HistoryRecord
from .keymap import BUTTON_BINDINGS, KEYBOARD_BINDINGS, Command


def display_panel(accumulator: Accumulator) -> Panel:
    """Two-line display: pending operation above, current value below."""
    body = Text(justify="right")
    body.append(accumulator.pending_summary or " ", style="dim")
    body.append("\n")
    body.append(accumulator.display, style="bold")
    return Panel(body, title="Scientific Calculator", border_style="blue", width=40)


def history_table(records: List[HistoryRecord]) -> Table:
    """History entries, newest first."""
    table = Table(title=f"Calculation History ({len(records)} items)")
    table.add_column("Expression", style="white")
    table.add_column("Result", style="cyan", justify="right")
    table.add_column("Time", style="dim")

    for record in records:
        table.add_row(
            record.expression,
            f"= {record.result}",
            record.timestamp.astimezone().strftime("%H:%M:%S"),
        )
    return table


def _bindings_table(title: str, bindings: Dict[str, Command]) -> Table:
    table = Table(title=title)
    table.add_column("Key", style="cyan")
    table.add_column("Command", style="white")
    for key, command in bindings.items():
        table.add_row(key, str(command))
    return table


def keyboard_table() -> Table:
    return _bindings_table("Keyboard", KEYBOARD_BINDINGS)


def button_table() -> Table:
    return _bindings_table("Buttons", BUTTON_BINDINGS)

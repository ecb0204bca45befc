"""Notification sinks for calculation errors and confirmations."""

from typing import List, Optional

from rich.console import Console


class Notifier:
    """Receives user-facing messages from the calculator.

    Interface only: subclasses implement both methods.
    """

    def notify_error(self, message: str) -> None:
        raise NotImplementedError

    def notify_success(self, message: str) -> None:
        raise NotImplementedError


class ConsoleNotifier(Notifier):
    """Prints messages to a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def notify_error(self, message: str) -> None:
        self.console.print(f"[red]Error: {message}[/red]")

    def notify_success(self, message: str) -> None:
        self.console.print(f"[green]{message}[/green]")


class CollectingNotifier(Notifier):
    """Keeps messages in memory instead of showing them."""

    def __init__(self):
        self.errors: List[str] = []
        self.successes: List[str] = []

    def notify_error(self, message: str) -> None:
        self.errors.append(message)

    def notify_success(self, message: str) -> None:
        self.successes.append(message)

    def clear(self) -> None:
        self.errors.clear()
        self.successes.clear()

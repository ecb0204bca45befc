"""CLI interface for the scientific calculator.

Commands:
- run: Feed key/button tokens to a fresh calculator and show the result
- repl: Interactive session with history
- keys: Show key and button bindings
"""

import json
import sys
from pathlib import Path

import click
import questionary
from rich.console import Console
from rich.markup import escape

from . import __version__
from .accumulator import Accumulator
from .config import load_config
from .keymap import UnknownKeyError, execute, parse_tokens
from .notifier import CollectingNotifier, ConsoleNotifier
from .render import button_table, display_panel, history_table, keyboard_table


console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="scicalc")
@click.pass_context
def main(ctx):
    """Scientific Calculator - keyboard-driven calculator with history.

    Tokens are button labels (C, ⌫, ×, ÷, sin, √, x², 1/x, π, ±, %),
    key names (Enter, Escape, Backspace, *, /, p, s, c, t) or numbers.
    """
    ctx.ensure_object(dict)
    ctx.obj["project_path"] = str(Path.cwd())


def _build_accumulator(ctx, notifier) -> Accumulator:
    config = load_config(ctx.obj["project_path"])
    return Accumulator(notifier=notifier, config=config)


# --- Run Command ---


@main.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("--history", "-H", "show_history", is_flag=True, help="Show calculation history")
@click.option("--json", "as_json", is_flag=True, help="Output result as JSON")
@click.pass_context
def run(ctx, tokens: tuple, show_history: bool, as_json: bool):
    """Evaluate a sequence of tokens.

    Example: scicalc run 2 + 3 × 4 =
    """
    try:
        commands = parse_tokens(tokens)
    except UnknownKeyError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    notifier = CollectingNotifier() if as_json else ConsoleNotifier(console)
    accumulator = _build_accumulator(ctx, notifier)

    for command in commands:
        execute(accumulator, command)

    if as_json:
        output = {
            "display": accumulator.display,
            "pending": accumulator.pending_summary,
            "history": [r.to_dict() for r in accumulator.history.all()],
            "errors": notifier.errors,
        }
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
        return

    console.print(display_panel(accumulator))
    if show_history:
        console.print(history_table(accumulator.history.all()))


# --- REPL Command ---


def _clear_history(accumulator: Accumulator, assume_yes: bool):
    count = len(accumulator.history)
    if count == 0:
        console.print("[dim]No calculations yet[/dim]")
        return

    if not assume_yes:
        confirmed = questionary.confirm(
            f"Clear {count} history entries?",
            default=False,
        ).ask()
        if not confirmed:
            console.print("[yellow]Aborted.[/yellow]")
            return

    accumulator.history.clear()
    accumulator.notifier.notify_success("History cleared.")


@main.command()
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompts")
@click.pass_context
def repl(ctx, yes: bool):
    """Start an interactive calculator session.

    Enter tokens separated by spaces. Also understands:
    history, history clear, keys, quit.
    """
    accumulator = _build_accumulator(ctx, ConsoleNotifier(console))
    console.print(display_panel(accumulator))

    while True:
        try:
            line = click.prompt("calc", default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            break

        line = line.strip()
        if not line:
            continue
        if line in ("quit", "exit"):
            break
        if line == "history":
            records = accumulator.history.all()
            if records:
                console.print(history_table(records))
            else:
                console.print("[dim]No calculations yet[/dim]")
            continue
        if line == "history clear":
            _clear_history(accumulator, yes)
            continue
        if line == "keys":
            console.print(keyboard_table())
            console.print(button_table())
            continue

        try:
            commands = parse_tokens(line.split())
        except UnknownKeyError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            continue

        for command in commands:
            execute(accumulator, command)
        console.print(display_panel(accumulator))


# --- Keys Command ---


@main.command()
def keys():
    """Show keyboard and button bindings."""
    console.print(keyboard_table())
    console.print(button_table())


if __name__ == "__main__":
    main()

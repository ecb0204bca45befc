"""Key and button bindings.

Translates physical key names and on-screen button labels into the same
logical commands, and runs those commands against an Accumulator.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

from .accumulator import Accumulator
from .history import HistoryRecord
from .operations import BinaryOperator, UnaryFunction


class UnknownKeyError(ValueError):
    """Raised when a token matches no key, button or number."""


class Action(Enum):
    """Logical calculator commands."""

    DIGIT = "digit"
    DECIMAL = "decimal"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    BACKSPACE = "backspace"
    FUNCTION = "function"


@dataclass(frozen=True)
class Command:
    """One logical input command."""

    action: Action
    argument: Union[str, BinaryOperator, UnaryFunction, None] = None

    def __str__(self) -> str:
        if self.argument is None:
            return self.action.value
        value = getattr(self.argument, "value", self.argument)
        return f"{self.action.value}({value})"


def _digits() -> Dict[str, Command]:
    return {d: Command(Action.DIGIT, d) for d in "0123456789"}


KEYBOARD_BINDINGS: Dict[str, Command] = {
    **_digits(),
    ".": Command(Action.DECIMAL),
    "+": Command(Action.OPERATOR, BinaryOperator.ADD),
    "-": Command(Action.OPERATOR, BinaryOperator.SUBTRACT),
    "*": Command(Action.OPERATOR, BinaryOperator.MULTIPLY),
    "/": Command(Action.OPERATOR, BinaryOperator.DIVIDE),
    "^": Command(Action.OPERATOR, BinaryOperator.POWER),
    "Enter": Command(Action.EQUALS),
    "=": Command(Action.EQUALS),
    "Escape": Command(Action.CLEAR),
    "Backspace": Command(Action.BACKSPACE),
    "p": Command(Action.FUNCTION, UnaryFunction.PI),
    "s": Command(Action.FUNCTION, UnaryFunction.SIN),
    "c": Command(Action.FUNCTION, UnaryFunction.COS),
    "t": Command(Action.FUNCTION, UnaryFunction.TAN),
}

BUTTON_BINDINGS: Dict[str, Command] = {
    **_digits(),
    ".": Command(Action.DECIMAL),
    "C": Command(Action.CLEAR),
    "⌫": Command(Action.BACKSPACE),
    "=": Command(Action.EQUALS),
    "√": Command(Action.FUNCTION, UnaryFunction.SQRT),
    **{op.value: Command(Action.OPERATOR, op) for op in BinaryOperator},
    **{fn.value: Command(Action.FUNCTION, fn) for fn in UnaryFunction},
}

_NUMBER = re.compile(r"^\d*\.?\d*$")


def translate_key(key: str) -> Optional[Command]:
    """Command for a physical key name, or None if unbound."""
    return KEYBOARD_BINDINGS.get(key)


def translate_button(label: str) -> Optional[Command]:
    """Command for an on-screen button label, or None if unknown."""
    return BUTTON_BINDINGS.get(label)


def parse_tokens(tokens: Iterable[str]) -> List[Command]:
    """Turn text tokens into commands.

    Each token is a button label, a key name, or a literal number such as
    ``12.5`` (expanded to one command per character). Button labels win
    over key names, so ``C`` clears and ``c`` is cosine.

    Raises:
        UnknownKeyError: If a token matches nothing.
    """
    commands: List[Command] = []
    for token in tokens:
        command = translate_button(token) or translate_key(token)
        if command is not None:
            commands.append(command)
        elif token and token != "." and _NUMBER.match(token):
            commands.extend(BUTTON_BINDINGS[ch] for ch in token)
        else:
            raise UnknownKeyError(f"Unknown key: {token!r}")
    return commands


def execute(accumulator: Accumulator, command: Command) -> Optional[HistoryRecord]:
    """Run one command; returns the history record it produced, if any."""
    action = command.action
    if action is Action.DIGIT:
        accumulator.enter_digit(command.argument)
    elif action is Action.DECIMAL:
        accumulator.enter_decimal_point()
    elif action is Action.OPERATOR:
        accumulator.choose_operator(command.argument)
    elif action is Action.EQUALS:
        return accumulator.equals()
    elif action is Action.CLEAR:
        accumulator.clear_all()
    elif action is Action.BACKSPACE:
        accumulator.backspace()
    elif action is Action.FUNCTION:
        return accumulator.apply_unary(command.argument)
    return None


def press_keys(accumulator: Accumulator, keys: Iterable[str]) -> List[HistoryRecord]:
    """Feed physical key names to the accumulator; unbound keys are ignored."""
    records = []
    for key in keys:
        command = translate_key(key)
        if command is None:
            continue
        entry = execute(accumulator, command)
        if entry is not None:
            records.append(entry)
    return records

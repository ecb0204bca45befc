"""Calculator input state machine.

Consumes button/key commands (digits, decimal point, operators, functions,
clear, backspace, equals) and keeps the display text, the pending
``left operator`` pair and the awaiting-operand flag up to date.

Operators chain left to right without precedence: ``2 + 3 × 4 =`` shows 20.
Completed calculations (equals, or any unary function) are recorded in the
history log. Errors never propagate: they go to the notifier and the state
stays valid.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from . import operations
from .config import CalculatorConfig
from .history import HistoryLog, HistoryRecord
from .notifier import CollectingNotifier, Notifier
from .operations import (
    BinaryOperator,
    CalculatorError,
    DivisionByZeroError,
    UnaryFunction,
    format_number,
    parse_display,
)


class Phase(Enum):
    """Input phase derived from the state fields."""

    IDLE = "idle"
    OPERAND_ENTRY = "operand_entry"
    AWAITING_SECOND_OPERAND = "awaiting_second_operand"
    RESULT_SHOWN = "result_shown"


@dataclass(frozen=True)
class PendingOperation:
    """A left operand waiting for its right-hand side."""

    left_operand: float
    operator: BinaryOperator

    @property
    def summary(self) -> str:
        return f"{format_number(self.left_operand)} {self.operator.value}"


@dataclass
class CalculatorState:
    """Everything the accumulator mutates."""

    display: str = "0"
    pending: Optional[PendingOperation] = None
    awaiting_operand: bool = False

    @property
    def phase(self) -> Phase:
        """Current input phase.

        RESULT_SHOWN covers the display after equals or a function with no
        operator pending: the flag is set, so the next digit starts a new
        number, but there is no second operand to wait for.
        """
        if self.awaiting_operand:
            return Phase.AWAITING_SECOND_OPERAND if self.pending else Phase.RESULT_SHOWN
        if self.pending is not None or self.display != "0":
            return Phase.OPERAND_ENTRY
        return Phase.IDLE


class Accumulator:
    """Running two-operand calculator."""

    def __init__(
        self,
        history: Optional[HistoryLog] = None,
        notifier: Optional[Notifier] = None,
        config: Optional[CalculatorConfig] = None,
    ):
        self.config = config or CalculatorConfig()
        self.history = history if history is not None else HistoryLog(self.config.history_capacity)
        self.notifier = notifier or CollectingNotifier()
        self._state = CalculatorState()

    # --- Observable outputs ---

    @property
    def display(self) -> str:
        return self._state.display

    @property
    def pending(self) -> Optional[PendingOperation]:
        return self._state.pending

    @property
    def awaiting_operand(self) -> bool:
        return self._state.awaiting_operand

    @property
    def pending_summary(self) -> str:
        """Secondary display line, e.g. ``"5 +"``; empty with nothing pending."""
        pending = self._state.pending
        return pending.summary if pending else ""

    @property
    def state(self) -> CalculatorState:
        """Copy of the current state."""
        return copy.copy(self._state)

    # --- Helpers ---

    def _input_value(self) -> float:
        return parse_display(self._state.display)

    def _digit_count(self) -> int:
        return sum(1 for ch in self._state.display if ch.isdigit())

    def _evaluate(self, a: float, b: float, op: BinaryOperator) -> float:
        """Evaluate a binary operation; division by zero leaves ``a``."""
        try:
            return operations.evaluate(a, b, op)
        except DivisionByZeroError as e:
            self.notifier.notify_error(str(e))
            return a

    # --- Input commands ---

    def enter_digit(self, digit: str) -> None:
        """Type a digit 0-9."""
        if len(digit) != 1 or digit not in "0123456789":
            raise ValueError(f"Not a digit: {digit!r}")

        state = self._state
        if state.awaiting_operand:
            state.display = digit
            state.awaiting_operand = False
        elif state.display == "0":
            state.display = digit
        else:
            max_digits = self.config.max_digits
            if max_digits and self._digit_count() >= max_digits:
                return
            state.display += digit

    def enter_decimal_point(self) -> None:
        """Type a decimal point; a second point in the same number is ignored."""
        state = self._state
        if state.awaiting_operand:
            state.display = "0."
            state.awaiting_operand = False
        elif "." not in state.display:
            state.display += "."

    def choose_operator(self, op: Union[BinaryOperator, str]) -> None:
        """Choose a binary operator, resolving any pending one first."""
        op = BinaryOperator(op)
        state = self._state
        input_value = self._input_value()

        if state.pending is None:
            state.pending = PendingOperation(input_value, op)
        else:
            result = self._evaluate(state.pending.left_operand, input_value, state.pending.operator)
            state.display = format_number(result)
            state.pending = PendingOperation(result, op)

        state.awaiting_operand = True

    def equals(self) -> Optional[HistoryRecord]:
        """Resolve the pending operation against the display value.

        Returns:
            The recorded HistoryRecord, or None if nothing was pending
            (or a failed division is configured not to be recorded).
        """
        state = self._state
        pending = state.pending
        if pending is None:
            return None

        input_value = self._input_value()
        divided_by_zero = pending.operator is BinaryOperator.DIVIDE and input_value == 0
        result = self._evaluate(pending.left_operand, input_value, pending.operator)
        result_text = format_number(result)

        entry = None
        if not divided_by_zero or self.config.record_division_by_zero:
            expression = (
                f"{format_number(pending.left_operand)} {pending.operator.value} "
                f"{format_number(input_value)}"
            )
            entry = self.history.record(expression, result_text)

        state.display = result_text
        state.pending = None
        state.awaiting_operand = True
        return entry

    def clear_all(self) -> None:
        """Reset display and pending operation. History is kept."""
        self._state = CalculatorState()

    def backspace(self) -> None:
        """Delete the last character of the display."""
        state = self._state
        if len(state.display) > 1:
            state.display = state.display[:-1]
        else:
            state.display = "0"

    def apply_unary(self, fn: Union[UnaryFunction, str]) -> Optional[HistoryRecord]:
        """Apply a function to the display value.

        A pending binary operation is left alone and later resolves against
        the function's result. On error nothing changes.

        Returns:
            The recorded HistoryRecord, or None if the function failed.
        """
        fn = UnaryFunction(fn)
        input_value = self._input_value()

        try:
            result = operations.apply_function(fn, input_value)
        except CalculatorError as e:
            self.notifier.notify_error(str(e))
            return None

        result_text = format_number(result)
        entry = self.history.record(f"{fn.value}({format_number(input_value)})", result_text)
        self._state.display = result_text
        self._state.awaiting_operand = True
        return entry

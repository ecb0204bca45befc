"""Scientific Calculator - keyboard-driven calculator with history.

A two-operand running calculator with:
- Digit, decimal point, backspace and clear input handling
- Left-to-right operator chaining (+, -, ×, ÷, ^)
- Scientific functions (trig in degrees, log, ln, √, x², 1/x, π, e, ±, %)
- Bounded newest-first calculation history
- Keyboard and button bindings
"""

__version__ = "1.0.0"

from .operations import (
    BinaryOperator,
    UnaryFunction,
    CalculatorError,
    DivisionByZeroError,
    DomainError,
)
from .history import HistoryLog, HistoryRecord
from .notifier import Notifier, ConsoleNotifier, CollectingNotifier
from .config import CalculatorConfig, load_config
from .accumulator import Accumulator, CalculatorState, PendingOperation, Phase

__all__ = [
    # Operators
    "BinaryOperator",
    "UnaryFunction",
    # Errors
    "CalculatorError",
    "DivisionByZeroError",
    "DomainError",
    # History
    "HistoryLog",
    "HistoryRecord",
    # Notification
    "Notifier",
    "ConsoleNotifier",
    "CollectingNotifier",
    # Configuration
    "CalculatorConfig",
    "load_config",
    # State machine
    "Accumulator",
    "CalculatorState",
    "PendingOperation",
    "Phase",
]

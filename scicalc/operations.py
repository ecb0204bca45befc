"""Operator tables for the calculator.

Provides:
- Binary operators (+, -, ×, ÷, ^) and their evaluation
- Unary functions (trig in degrees, logs, roots, constants, sign, percent)
- Number <-> display text conversion
"""

import math
import re
from decimal import Decimal
from enum import Enum
from typing import Callable, Dict


class CalculatorError(Exception):
    """Base class for recoverable calculation errors."""


class DivisionByZeroError(CalculatorError):
    """Raised when dividing by zero (÷ with a zero divisor, or 1/x of 0)."""


class DomainError(CalculatorError):
    """Raised when a function is undefined for its argument."""


class BinaryOperator(str, Enum):
    """Two-operand operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"
    POWER = "^"


class UnaryFunction(str, Enum):
    """Single-argument functions applied to the display value."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LOG = "log"
    LN = "ln"
    SQRT = "sqrt"
    SQUARE = "x²"
    RECIPROCAL = "1/x"
    PI = "π"
    E = "e"
    NEGATE = "±"
    PERCENT = "%"


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == int(value) and int(value) % 2 == 1


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError("Cannot divide by zero")
    return a / b


def _power(a: float, b: float) -> float:
    """Float power with IEEE results where math.pow raises."""
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _is_odd_integer(b) else math.inf
    except ValueError:
        if a == 0:
            # 0 ^ negative
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan


BINARY_OPERATIONS: Dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUBTRACT: lambda a, b: a - b,
    BinaryOperator.MULTIPLY: lambda a, b: a * b,
    BinaryOperator.DIVIDE: _divide,
    BinaryOperator.POWER: _power,
}


def evaluate(a: float, b: float, op: BinaryOperator) -> float:
    """Evaluate ``a op b``.

    Raises:
        DivisionByZeroError: If op is ÷ and b is zero.
    """
    return BINARY_OPERATIONS[BinaryOperator(op)](a, b)


def _in_degrees(fn: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        radians = x * math.pi / 180
        if math.isinf(radians):
            return math.nan
        return fn(radians)

    return wrapped


def _log10(x: float) -> float:
    if x <= 0:
        raise DomainError("Logarithm undefined for non-positive values")
    return math.log10(x)


def _ln(x: float) -> float:
    if x <= 0:
        raise DomainError("Natural logarithm undefined for non-positive values")
    return math.log(x)


def _sqrt(x: float) -> float:
    if x < 0:
        raise DomainError("Square root undefined for negative values")
    return math.sqrt(x)


def _reciprocal(x: float) -> float:
    if x == 0:
        raise DivisionByZeroError("Cannot divide by zero")
    return 1 / x


UNARY_FUNCTIONS: Dict[UnaryFunction, Callable[[float], float]] = {
    UnaryFunction.SIN: _in_degrees(math.sin),
    UnaryFunction.COS: _in_degrees(math.cos),
    UnaryFunction.TAN: _in_degrees(math.tan),
    UnaryFunction.LOG: _log10,
    UnaryFunction.LN: _ln,
    UnaryFunction.SQRT: _sqrt,
    UnaryFunction.SQUARE: lambda x: x * x,
    UnaryFunction.RECIPROCAL: _reciprocal,
    UnaryFunction.PI: lambda x: math.pi,
    UnaryFunction.E: lambda x: math.e,
    UnaryFunction.NEGATE: lambda x: -x,
    UnaryFunction.PERCENT: lambda x: x / 100,
}


def apply_function(fn: UnaryFunction, x: float) -> float:
    """Apply a unary function to x.

    Raises:
        DomainError: log/ln of a non-positive value, sqrt of a negative one.
        DivisionByZeroError: 1/x of zero.
    """
    return UNARY_FUNCTIONS[UnaryFunction(fn)](x)


def format_number(value: float) -> str:
    """Format a number the way the display shows it.

    Integral values drop the fractional part, other values use the shortest
    digits that round-trip. Magnitudes below 1e-6 or from 1e21 up switch to
    exponent notation (``1e+21``, ``2.5e-7``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(float(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent  # position of the decimal point relative to the digits
    prefix = "-" if sign else ""

    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * (-n) + digits

    e = n - 1
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{prefix}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))"
)


def parse_display(text: str) -> float:
    """Parse the leading number in display text.

    Trailing garbage is ignored (``"1e+"`` -> 1.0, ``"0."`` -> 0.0); text
    with no leading number parses to NaN.
    """
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))

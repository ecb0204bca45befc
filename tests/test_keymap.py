"""Tests for keymap.py - Key/button bindings and command execution."""

import pytest

from scicalc.accumulator import Accumulator
from scicalc.keymap import (
    Action,
    Command,
    KEYBOARD_BINDINGS,
    BUTTON_BINDINGS,
    UnknownKeyError,
    translate_key,
    translate_button,
    parse_tokens,
    execute,
    press_keys,
)
from scicalc.operations import BinaryOperator, UnaryFunction


class TestKeyboardBindings:
    """Tests for physical key translation."""

    def test_digits(self):
        """Test digits."""
        for d in "0123456789":
            assert translate_key(d) == Command(Action.DIGIT, d)

    def test_operator_aliases(self):
        """Test operator aliases."""
        assert translate_key("*") == Command(Action.OPERATOR, BinaryOperator.MULTIPLY)
        assert translate_key("/") == Command(Action.OPERATOR, BinaryOperator.DIVIDE)
        assert translate_key("^") == Command(Action.OPERATOR, BinaryOperator.POWER)

    def test_equals_keys(self):
        """Test equals keys."""
        assert translate_key("Enter") == Command(Action.EQUALS)
        assert translate_key("=") == Command(Action.EQUALS)

    def test_editing_keys(self):
        """Test editing keys."""
        assert translate_key("Escape") == Command(Action.CLEAR)
        assert translate_key("Backspace") == Command(Action.BACKSPACE)

    def test_function_shortcuts(self):
        """Test function shortcuts."""
        assert translate_key("p").argument is UnaryFunction.PI
        assert translate_key("s").argument is UnaryFunction.SIN
        assert translate_key("c").argument is UnaryFunction.COS
        assert translate_key("t").argument is UnaryFunction.TAN

    def test_unbound_key(self):
        """Test unbound key."""
        assert translate_key("Shift") is None
        assert translate_key("x") is None


class TestButtonBindings:
    """Tests for on-screen button translation."""

    def test_every_function_has_a_button(self):
        """Test every function has a button."""
        for fn in UnaryFunction:
            assert translate_button(fn.value) == Command(Action.FUNCTION, fn)

    def test_every_operator_has_a_button(self):
        """Test every operator has a button."""
        for op in BinaryOperator:
            assert translate_button(op.value) == Command(Action.OPERATOR, op)

    def test_special_buttons(self):
        """Test special buttons."""
        assert translate_button("C") == Command(Action.CLEAR)
        assert translate_button("⌫") == Command(Action.BACKSPACE)
        assert translate_button("√") == Command(Action.FUNCTION, UnaryFunction.SQRT)

    def test_command_str(self):
        """Test command str."""
        assert str(BUTTON_BINDINGS["÷"]) == "operator(÷)"
        assert str(KEYBOARD_BINDINGS["Escape"]) == "clear"


class TestParseTokens:
    """Tests for token parsing."""

    def test_number_expands(self):
        """Test number expands."""
        commands = parse_tokens(["12.5"])
        assert commands == [
            Command(Action.DIGIT, "1"),
            Command(Action.DIGIT, "2"),
            Command(Action.DECIMAL),
            Command(Action.DIGIT, "5"),
        ]

    def test_buttons_win_over_keys(self):
        """Test buttons win over keys."""
        assert parse_tokens(["C"]) == [Command(Action.CLEAR)]
        assert parse_tokens(["c"]) == [Command(Action.FUNCTION, UnaryFunction.COS)]

    def test_mixed_tokens(self):
        """Test mixed tokens."""
        commands = parse_tokens(["2", "*", "3", "Enter"])
        assert [c.action for c in commands] == [
            Action.DIGIT,
            Action.OPERATOR,
            Action.DIGIT,
            Action.EQUALS,
        ]

    def test_unknown_token(self):
        """Test unknown token."""
        with pytest.raises(UnknownKeyError, match="foo"):
            parse_tokens(["2", "foo"])

    def test_empty_token(self):
        """Test empty token."""
        with pytest.raises(UnknownKeyError):
            parse_tokens([""])


class TestExecute:
    """Tests for running commands."""

    def test_sequence(self):
        """Test sequence."""
        calc = Accumulator()
        for command in parse_tokens(["2", "+", "3", "×", "4", "="]):
            execute(calc, command)
        assert calc.display == "20"

    def test_execute_returns_record(self):
        """Test execute returns record."""
        calc = Accumulator()
        execute(calc, Command(Action.DIGIT, "9"))
        record = execute(calc, Command(Action.FUNCTION, UnaryFunction.SQRT))
        assert record.result == "3"

    def test_execute_clear(self):
        """Test execute clear."""
        calc = Accumulator()
        execute(calc, Command(Action.DIGIT, "9"))
        assert execute(calc, Command(Action.CLEAR)) is None
        assert calc.display == "0"

    def test_press_keys(self):
        """Test press keys."""
        calc = Accumulator()
        records = press_keys(calc, ["6", "Shift", "^", "2", "Enter"])
        assert calc.display == "36"
        assert [r.expression for r in records] == ["6 ^ 2"]

    def test_press_keys_backspace_and_escape(self):
        """Test press keys backspace and escape."""
        calc = Accumulator()
        press_keys(calc, ["4", "2", "Backspace"])
        assert calc.display == "4"
        press_keys(calc, ["Escape"])
        assert calc.display == "0"

"""Tests for the presentation adapter."""

import pytest

from web_calculator.adapter import (
    BUTTON_COMMANDS,
    KEY_COMMANDS,
    View,
    command_for_button,
    command_for_key,
    render,
)
from web_calculator.commands import (
    ApplyOperator,
    Backspace,
    ClearAll,
    ClearEntry,
    Digit,
    Dot,
    Equals,
    Sign,
)
from web_calculator.machine import run
from web_calculator.state import DEFAULT_STATE, CalculatorState, Operator


@pytest.mark.parametrize(
    "key, command",
    [
        ("7", Digit("7")),
        (".", Dot()),
        (",", Dot()),
        ("+", ApplyOperator(Operator.ADD)),
        ("-", ApplyOperator(Operator.SUBTRACT)),
        ("*", ApplyOperator(Operator.MULTIPLY)),
        ("/", ApplyOperator(Operator.DIVIDE)),
        ("=", Equals()),
        ("Enter", Equals()),
        ("Escape", ClearEntry()),
        ("Backspace", Backspace()),
    ],
)
def test_key_mapping(key, command):
    """Test keyboard keys map to their commands."""
    assert command_for_key(key) == command


@pytest.mark.parametrize(
    "value, command",
    [
        ("0", Digit("0")),
        ("dot", Dot()),
        ("add", ApplyOperator(Operator.ADD)),
        ("sub", ApplyOperator(Operator.SUBTRACT)),
        ("mul", ApplyOperator(Operator.MULTIPLY)),
        ("div", ApplyOperator(Operator.DIVIDE)),
        ("equals", Equals()),
        ("clearElement", ClearEntry()),
        ("clear", ClearAll()),
        ("back", Backspace()),
        ("sign", Sign()),
    ],
)
def test_button_mapping(value, command):
    """Test button values map to their commands."""
    assert command_for_button(value) == command


def test_unrecognised_input_maps_to_none():
    """Test unknown keys and buttons produce no command."""
    for key in ("a", "Shift", "F5", "Tab", "12", ""):
        assert command_for_key(key) is None
    for value in ("plus", "7.5", ""):
        assert command_for_button(value) is None


def test_mapping_tables_are_read_only():
    """Test the mapping tables cannot be modified."""
    with pytest.raises(TypeError):
        KEY_COMMANDS["x"] = Dot()
    with pytest.raises(TypeError):
        BUTTON_COMMANDS["x"] = Dot()


def test_render_without_pending_operator_blanks_secondary():
    """Test the secondary display is blank with no pending operator."""
    view = render(CalculatorState(previous_value=9.0, input_buffer="3.", has_input=True))
    assert view == View(previous="", operator="", screen="3.")
    assert view.secondary == ""


def test_render_with_pending_operator():
    """Test the secondary display shows previous value and operator."""
    state = run([Digit("7"), ApplyOperator(Operator.DIVIDE)])
    view = render(state)
    assert view.previous == "7"
    assert view.operator == "/"
    assert view.screen == "7"
    assert view.secondary == "7 /"


def test_render_shows_buffer_verbatim():
    """Test a lone minus is shown as typed."""
    state = run([Digit("5"), Sign(), Backspace()])
    assert render(state).screen == "-"


def test_render_default_state():
    """Test rendering of the default state."""
    assert render(DEFAULT_STATE).to_dict() == {"previous": "", "operator": "", "screen": "0"}

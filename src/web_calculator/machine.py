"""
=============================================================================
MODULE NAME: machine.py
=============================================================================

INPUT FILES:
- None (pure state transitions).

OUTPUT FILES:
- None.

NOTES:
- apply() never mutates its input and never raises for a valid command.
- Operators chain left to right: each new operator commits the pending one
  before taking its place.
- Numeric edge cases (division by zero, overflow) flow through as
  Infinity/NaN and are displayed as produced.
=============================================================================
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Dict, Type

from .arithmetic import calculate, format_number, parse_number
from .commands import (
    ApplyOperator,
    Backspace,
    ClearAll,
    ClearEntry,
    Command,
    Digit,
    Dot,
    Equals,
    Sign,
)
from .state import DEFAULT_STATE, CalculatorState

logger = logging.getLogger(__name__)


def apply(command: Command, state: CalculatorState) -> CalculatorState:
    """
    Compute the state that follows ``command``.

    Args:
        command: One of the command variants from ``web_calculator.commands``
        state: Current calculator state

    Returns:
        The next state (``state`` itself when the command is a no-op)
    """
    handler = _HANDLERS[type(command)]
    next_state = handler(command, state)
    logger.debug("%r: %r -> %r", command, state, next_state)
    return next_state


def _commit_pending(state: CalculatorState) -> float:
    """Fold the input buffer into previous_value using the pending operator."""
    current_value = parse_number(state.input_buffer)
    return calculate(state.previous_value, state.pending_operator, current_value)


def _digit(command: Digit, state: CalculatorState) -> CalculatorState:
    if not state.has_input:
        return replace(state, input_buffer=command.digit, has_input=True)
    return replace(state, input_buffer=state.input_buffer + command.digit)


def _dot(command: Dot, state: CalculatorState) -> CalculatorState:
    if "." in state.input_buffer:
        return state
    return replace(state, input_buffer=state.input_buffer + ".", has_input=True)


def _sign(command: Sign, state: CalculatorState) -> CalculatorState:
    if not state.has_input:
        return state
    buffer = state.input_buffer
    if buffer.startswith("-"):
        if len(buffer) == 1:
            return replace(state, input_buffer="0", has_input=False)
        return replace(state, input_buffer=buffer[1:])
    return replace(state, input_buffer="-" + buffer)


def _backspace(command: Backspace, state: CalculatorState) -> CalculatorState:
    buffer = state.input_buffer[:-1]
    if not buffer:
        return replace(state, input_buffer="0", has_input=False)
    return replace(state, input_buffer=buffer)


def _operator(command: ApplyOperator, state: CalculatorState) -> CalculatorState:
    if not state.has_input:
        # Operator substitution: the second operand has not been started yet
        return replace(state, pending_operator=command.operator)

    if state.pending_operator is not None:
        previous_value = _commit_pending(state)
    else:
        previous_value = parse_number(state.input_buffer)

    return replace(
        state,
        previous_value=previous_value,
        pending_operator=command.operator,
        has_input=False,
    )


def _equals(command: Equals, state: CalculatorState) -> CalculatorState:
    if state.pending_operator is None:
        return state
    previous_value = _commit_pending(state)
    return replace(
        state,
        previous_value=previous_value,
        pending_operator=None,
        input_buffer=format_number(previous_value),
    )


def _clear_entry(command: ClearEntry, state: CalculatorState) -> CalculatorState:
    return replace(state, input_buffer="0", has_input=False)


def _clear_all(command: ClearAll, state: CalculatorState) -> CalculatorState:
    return DEFAULT_STATE


_HANDLERS: Dict[Type, Callable[..., CalculatorState]] = {
    Digit: _digit,
    Dot: _dot,
    Sign: _sign,
    Backspace: _backspace,
    ApplyOperator: _operator,
    Equals: _equals,
    ClearEntry: _clear_entry,
    ClearAll: _clear_all,
}


def run(commands, state: CalculatorState = DEFAULT_STATE) -> CalculatorState:
    """Apply a sequence of commands in order, starting from ``state``."""
    for command in commands:
        state = apply(command, state)
    return state


__all__ = ["apply", "run"]

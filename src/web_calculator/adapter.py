"""
Presentation adapter.

Maps raw input (keyboard ``KeyboardEvent.key`` names and button values) to
state machine commands, and renders a state into the text shown on the
calculator's two displays.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .arithmetic import format_number
from .commands import (
    DIGITS,
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
from .state import CalculatorState, Operator


BUTTON_COMMANDS: Mapping[str, Command] = MappingProxyType(
    {
        "clearElement": ClearEntry(),
        "clear": ClearAll(),
        "back": Backspace(),
        "sign": Sign(),
        "dot": Dot(),
        "equals": Equals(),
        **{op.value: ApplyOperator(op) for op in Operator},
        **{d: Digit(d) for d in sorted(DIGITS)},
    }
)

KEY_COMMANDS: Mapping[str, Command] = MappingProxyType(
    {
        "Escape": ClearEntry(),
        "Backspace": Backspace(),
        ".": Dot(),
        ",": Dot(),
        "Enter": Equals(),
        "=": Equals(),
        **{op.symbol: ApplyOperator(op) for op in Operator},
        **{d: Digit(d) for d in sorted(DIGITS)},
    }
)


def command_for_key(key: str) -> Optional[Command]:
    """Return the command bound to a key, or None when the key is not handled."""
    return KEY_COMMANDS.get(key)


def command_for_button(value: str) -> Optional[Command]:
    """Return the command bound to a button value, or None for unknown buttons."""
    return BUTTON_COMMANDS.get(value)


@dataclass(frozen=True, slots=True)
class View:
    """Text for the calculator displays."""

    previous: str
    operator: str
    screen: str

    @property
    def secondary(self) -> str:
        """Previous value and operator symbol, as one line."""
        return f"{self.previous} {self.operator}".strip()

    def to_dict(self) -> Dict[str, str]:
        """JSON payload for the API."""
        return {
            "previous": self.previous,
            "operator": self.operator,
            "screen": self.screen,
        }


def render(state: CalculatorState) -> View:
    """
    Render a state for display.

    The secondary display (previous value and operator) stays blank until an
    operator is pending. The primary display shows the input buffer verbatim,
    trailing dot and lone minus included.
    """
    if state.pending_operator is None:
        return View(previous="", operator="", screen=state.input_buffer)
    return View(
        previous=format_number(state.previous_value),
        operator=state.pending_operator.symbol,
        screen=state.input_buffer,
    )


__all__ = [
    "BUTTON_COMMANDS",
    "KEY_COMMANDS",
    "command_for_key",
    "command_for_button",
    "View",
    "render",
]

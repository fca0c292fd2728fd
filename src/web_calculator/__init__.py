"""Browser calculator: input state machine plus Flask front-end."""

from .adapter import View, command_for_button, command_for_key, render
from .machine import apply, run
from .state import DEFAULT_STATE, CalculatorState, Operator

__version__ = "0.1.0"

__all__ = [
    "CalculatorState",
    "DEFAULT_STATE",
    "Operator",
    "View",
    "apply",
    "run",
    "render",
    "command_for_key",
    "command_for_button",
]

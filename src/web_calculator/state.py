"""
=============================================================================
MODULE NAME: state.py
=============================================================================

INPUT FILES:
- None (state containers only).

OUTPUT FILES:
- None.

NOTES:
- CalculatorState is frozen; transitions build a new instance with
  dataclasses.replace.
- Operator carries both the button value used by the page and the printable
  symbol shown on the secondary display.
=============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Operator(Enum):
    """Binary operators the calculator can hold pending."""

    ADD = "add"
    SUBTRACT = "sub"
    MULTIPLY = "mul"
    DIVIDE = "div"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Operator.ADD: "+",
    Operator.SUBTRACT: "-",
    Operator.MULTIPLY: "*",
    Operator.DIVIDE: "/",
}


@dataclass(frozen=True, slots=True)
class CalculatorState:
    """Snapshot of the calculator between two commands."""

    previous_value: float = 0.0
    input_buffer: str = "0"
    pending_operator: Optional[Operator] = None
    has_input: bool = False


DEFAULT_STATE = CalculatorState()


__all__ = ["Operator", "CalculatorState", "DEFAULT_STATE"]

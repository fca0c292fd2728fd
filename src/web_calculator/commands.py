"""Commands understood by the calculator state machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .state import Operator

DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class Digit:
    digit: str

    def __post_init__(self) -> None:
        if self.digit not in DIGITS:
            raise ValueError(f"Not a single decimal digit: {self.digit!r}")


@dataclass(frozen=True, slots=True)
class Dot:
    pass


@dataclass(frozen=True, slots=True)
class Sign:
    pass


@dataclass(frozen=True, slots=True)
class Backspace:
    pass


@dataclass(frozen=True, slots=True)
class ApplyOperator:
    operator: Operator


@dataclass(frozen=True, slots=True)
class Equals:
    pass


@dataclass(frozen=True, slots=True)
class ClearEntry:
    pass


@dataclass(frozen=True, slots=True)
class ClearAll:
    pass


Command = Union[Digit, Dot, Sign, Backspace, ApplyOperator, Equals, ClearEntry, ClearAll]

COMMAND_TYPES = (Digit, Dot, Sign, Backspace, ApplyOperator, Equals, ClearEntry, ClearAll)


__all__ = [
    "Digit",
    "Dot",
    "Sign",
    "Backspace",
    "ApplyOperator",
    "Equals",
    "ClearEntry",
    "ClearAll",
    "Command",
    "COMMAND_TYPES",
    "DIGITS",
]

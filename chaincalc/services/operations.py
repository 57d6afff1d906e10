"""Fixed set of binary arithmetic operations and their accepted symbols."""

from __future__ import annotations

import math
import numbers
import operator
from enum import Enum
from typing import Any, Callable

from chaincalc.services.errors import (
    DivisionByZeroError,
    InvalidInputError,
    InvalidOperationError,
    ModuloByZeroError,
)

BinaryFunction = Callable[[float, float], float]


class Operation(str, Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    MODULO = "modulo"
    DIVIDE = "divide"

    @property
    def symbols(self) -> tuple[str, ...]:
        return _SYMBOLS[self]

    def apply(self, a: float, b: float) -> float:
        return _FUNCTIONS[self](as_double(a), as_double(b))

    @classmethod
    def from_symbol(cls, text: str) -> Operation:
        """Resolve a user-entered symbol, ignoring surrounding whitespace.

        Matching is exact and case-sensitive. The first operation in
        declaration order whose symbol set contains the trimmed text wins.
        """
        if not isinstance(text, str):
            raise InvalidOperationError(text)

        symbol = text.strip()
        for op in cls:
            if symbol in _SYMBOLS[op]:
                return op
        raise InvalidOperationError(text)

    @classmethod
    def all_symbols(cls) -> str:
        return ", ".join(symbol for op in cls for symbol in _SYMBOLS[op])


def as_double(value: Any) -> float:
    """Convert a real number to a double; magnitudes beyond the double range become infinite."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(value)
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _positive_zero(value: float) -> float:
    # -0.0 == 0.0, so this also maps -0.0 onto +0.0
    return 0.0 if value == 0.0 else value


def _add(a: float, b: float) -> float:
    return _positive_zero(a + b)


def _modulo(a: float, b: float) -> float:
    if b == 0:
        raise ModuloByZeroError()
    if math.isinf(a):
        return math.nan
    # fmod keeps the sign of the dividend
    return _positive_zero(math.fmod(a, b))


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZeroError()
    return a / b


_FUNCTIONS: dict[Operation, BinaryFunction] = {
    Operation.ADD: _add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.MODULO: _modulo,
    Operation.DIVIDE: _divide,
}

_SYMBOLS: dict[Operation, tuple[str, ...]] = {
    Operation.ADD: ("+",),
    Operation.SUBTRACT: ("-",),
    Operation.MULTIPLY: ("*", "x", "X"),
    Operation.MODULO: ("%",),
    Operation.DIVIDE: ("/",),
}

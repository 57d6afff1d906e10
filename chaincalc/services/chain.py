from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from chaincalc.services.operations import Operation

if TYPE_CHECKING:
    from chaincalc.services.calculator import CalculatorService

logger = logging.getLogger("chaincalc.chain")


class OperationChain:
    """Running value that successive operations are applied to, left to right.

    A step that raises leaves the value exactly as it was before the step.
    """

    def __init__(self, initial_value: float, calculator: CalculatorService) -> None:
        self._value = initial_value
        self._calculator = calculator
        self._lock = threading.Lock()

    def chain(self, op: Operation, operand: float) -> OperationChain:
        with self._lock:
            new_value = self._calculator.calculate(op, self._value, operand)
            logger.debug(
                "chain.step",
                extra={"operation": op.value, "operand": operand, "before": self._value, "after": new_value},
            )
            self._value = new_value
        return self

    def get_result(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r})"

from __future__ import annotations

import logging

from chaincalc.models.calculator import CalculationResult
from chaincalc.services.chain import OperationChain
from chaincalc.services.errors import InvalidInputError, NullOperandError
from chaincalc.services.operations import Operation, as_double

logger = logging.getLogger("chaincalc.calculator")


class CalculatorService:
    def calculate(self, op: Operation | None, a: float | None, b: float | None) -> float:
        if op is None or a is None or b is None:
            raise NullOperandError()
        if not isinstance(op, Operation):
            raise InvalidInputError(op)

        result = op.apply(as_double(a), as_double(b))
        logger.debug(
            "calculation.complete",
            extra={"operation": op.value, "operand_a": a, "operand_b": b, "result": result},
        )
        return result

    def start(self, initial_value: float | None) -> OperationChain:
        if initial_value is None:
            raise NullOperandError("Initial value must not be None.")

        value = as_double(initial_value)
        logger.debug("chain.start", extra={"initial_value": value})
        return OperationChain(value, self)

    def evaluate(self, symbol: str, a: float, b: float) -> CalculationResult:
        op = Operation.from_symbol(symbol)
        result = self.calculate(op, a, b)
        return CalculationResult(
            operation=op,
            operand_a=as_double(a),
            operand_b=as_double(b),
            result=result,
        )

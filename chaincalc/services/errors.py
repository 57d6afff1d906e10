from __future__ import annotations

from typing import Any

from chaincalc.core.exceptions import AppError


class CalculatorError(AppError):
    error_type = "CALCULATOR_ERROR"


class NullOperandError(CalculatorError):
    error_type = "NULL_OPERAND"

    def __init__(self, message: str = "Operation and operands must not be None.") -> None:
        super().__init__(message)


class InvalidOperationError(CalculatorError):
    error_type = "INVALID_OPERATION"

    def __init__(self, symbol: Any) -> None:
        super().__init__(f"Invalid operation: {symbol}", details={"input": symbol})
        self.symbol = symbol


class DivisionByZeroError(CalculatorError):
    error_type = "DIVISION_BY_ZERO"

    def __init__(self) -> None:
        super().__init__("Cannot divide by zero")


class ModuloByZeroError(CalculatorError):
    error_type = "MODULO_BY_ZERO"

    def __init__(self) -> None:
        super().__init__("Cannot perform modulo by zero")


class InvalidInputError(CalculatorError):
    error_type = "INVALID_INPUT"

    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid input: {value}", details={"input": str(value)})
        self.value = value

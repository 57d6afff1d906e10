from chaincalc.services.calculator import CalculatorService


def create_calculator() -> CalculatorService:
    """
    Factory for the default calculator implementation.
    Callers should go through here rather than instantiating the service directly.
    """

    return CalculatorService()

from pydantic import BaseModel, Field

from chaincalc.services.operations import Operation


class CalculationResult(BaseModel):
    operation: Operation = Field(..., description="The operation that was applied.")
    operand_a: float = Field(..., description="Left-hand operand.")
    operand_b: float = Field(..., description="Right-hand operand.")
    result: float = Field(..., description="The computed value; may be infinite or NaN.")

# models/responses.py
from pydantic import BaseModel, Field
from typing import Optional


class EvaluateResponse(BaseModel):
    expression: str = Field(..., description="Expression that was evaluated")
    result: float = Field(..., description="Numeric result")
    display: str = Field(..., description="Result formatted for display")
    next_expression: Optional[str] = Field(
        ...,
        description="Result as expression text to continue calculating with, "
        "within the expression length limit; null when the magnitude cannot fit",
    )
    next_expression_exact: bool = Field(
        ..., description="Whether next_expression evaluates to exactly the result"
    )


class PreviewResponse(BaseModel):
    result: float = Field(..., description="Live preview value")
    display: str = Field(..., description="Preview formatted for display")


class InputResponse(PreviewResponse):
    expression: str = Field(..., description="Expression after the key press")


class HealthResponse(BaseModel):
    status: str = Field("ok", description="Service status")

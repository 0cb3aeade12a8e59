# models/requests.py
from pydantic import BaseModel, Field
from ..core.config import settings


class EvaluateRequest(BaseModel):
    expression: str = Field(
        ...,
        description="Expression to evaluate (e.g. '2 + 3 * 4')",
        max_length=settings.max_expression_length,
    )


class PreviewRequest(EvaluateRequest):
    last_result: float = Field(
        0.0, description="Last good result, shown while the expression is incomplete"
    )


class InputRequest(BaseModel):
    expression: str = Field(
        "",
        description="Expression before the key press",
        max_length=settings.max_expression_length,
    )
    key: str = Field(
        ..., description="Keypad action or keyboard key", min_length=1, max_length=32
    )
    last_result: float = Field(
        0.0, description="Last good result, shown while the expression is incomplete"
    )

# models/__init__.py
from .model_history import (
    HistoryEntry,
    HistoryItem,
    HistoryListResponse,
    HistoryClearResponse,
)
from .model_requests import EvaluateRequest, PreviewRequest, InputRequest
from .model_responses import (
    EvaluateResponse,
    PreviewResponse,
    InputResponse,
    HealthResponse,
)

__all__ = [
    "HistoryEntry",
    "HistoryItem",
    "HistoryListResponse",
    "HistoryClearResponse",
    "EvaluateRequest",
    "PreviewRequest",
    "InputRequest",
    "EvaluateResponse",
    "PreviewResponse",
    "InputResponse",
    "HealthResponse",
]

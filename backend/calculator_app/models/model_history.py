# models/history.py
from pydantic import BaseModel, Field
from typing import List


class HistoryEntry(BaseModel):
    expr: str = Field(..., description="Expression as it was evaluated")
    result: float = Field(..., description="Numeric result of the expression")
    ts: int = Field(..., description="Evaluation time in epoch milliseconds")


class HistoryItem(HistoryEntry):
    display: str = Field(..., description="Result formatted for display")


class HistoryListResponse(BaseModel):
    count: int = Field(..., description="Number of history entries")
    items: List[HistoryItem] = Field(
        default_factory=list, description="History entries, newest first"
    )


class HistoryClearResponse(BaseModel):
    message: str = Field(..., description="Status message about the clear operation")
    cleared: int = Field(..., description="Number of entries removed")

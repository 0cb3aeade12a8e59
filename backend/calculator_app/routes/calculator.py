from fastapi import APIRouter, Depends, HTTPException
import logging

from ..models import (
    EvaluateRequest,
    EvaluateResponse,
    HealthResponse,
    HistoryClearResponse,
    HistoryItem,
    HistoryListResponse,
    InputRequest,
    InputResponse,
    PreviewRequest,
    PreviewResponse,
)
from ..services.calculator import Calculator
from ..services.composer import apply_key
from ..services.formatting import format_for_input, format_number
from ..core.config import settings
from ..core.history import HistoryStore, history_store
from ..core.exceptions import CalculatorAppException, CalculatorError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_history_store() -> HistoryStore:
    """Dependency for the history store."""
    return history_store


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok")


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate(
    request: EvaluateRequest,
    store: HistoryStore = Depends(get_history_store),
):
    """
    Evaluate an expression and record it in the history.

    Args:
        request: EvaluateRequest containing the expression
        store: Injected history store

    Returns:
        EvaluateResponse with the result, its display form and the text to
        continue calculating with. Blank input yields 0 and is not recorded.

    Raises:
        HTTPException: 400 with {kind, message} for a rejected expression,
            500 if the history cannot be saved
    """
    try:
        logger.info(f"Processing evaluate request: {request.expression}")
        result = Calculator.evaluate(request.expression)
        # Blank input evaluates to 0 but is not worth a history entry
        if request.expression.strip():
            store.add(request.expression, result)

        next_expression = format_for_input(result, settings.max_expression_length)
        return EvaluateResponse(
            expression=request.expression,
            result=result,
            display=format_number(result),
            next_expression=next_expression,
            next_expression_exact=next_expression == format_for_input(result),
        )

    except CalculatorError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())
    except CalculatorAppException as e:
        logger.error(f"Calculator error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/preview", response_model=PreviewResponse)
def preview(request: PreviewRequest):
    """Live preview: never fails on an incomplete expression."""
    result = Calculator.preview(request.expression, request.last_result)
    return PreviewResponse(result=result, display=format_number(result))


@router.post("/input", response_model=InputResponse)
def press_key(request: InputRequest):
    """Apply a key press to the expression and preview the outcome."""
    expression = apply_key(request.expression, request.key)
    result = Calculator.preview(expression, request.last_result)
    return InputResponse(
        expression=expression, result=result, display=format_number(result)
    )


@router.get("/history", response_model=HistoryListResponse)
def get_history(store: HistoryStore = Depends(get_history_store)):
    entries = store.load()
    items = [
        HistoryItem(**entry.model_dump(), display=format_number(entry.result))
        for entry in entries
    ]
    return HistoryListResponse(count=len(items), items=items)


@router.delete("/history", response_model=HistoryClearResponse)
def clear_history(store: HistoryStore = Depends(get_history_store)):
    try:
        cleared = store.clear()
        return HistoryClearResponse(message="History cleared", cleared=cleared)
    except CalculatorAppException as e:
        logger.error(f"Error clearing history: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to clear history")

"""
Calculator service for evaluating mathematical expressions.
"""

import logging

from .expression import evaluate_postfix, to_postfix, tokenize
from ..core.exceptions import CalculatorError

logger = logging.getLogger(__name__)


class Calculator:
    """A safe calculator that evaluates basic mathematical expressions."""

    @staticmethod
    def evaluate(expression: str) -> float:
        """
        Safely evaluate a mathematical expression.

        The expression is tokenized, reordered into postfix with the
        shunting-yard algorithm and evaluated on an operand stack. Nothing is
        handed to Python's own evaluator.

        Args:
            expression: A string containing a mathematical expression (e.g., "2 + 3 * 4")

        Returns:
            The result of evaluating the expression; 0.0 for empty input

        Raises:
            CalculatorError: A subclass naming why the expression was rejected
        """
        logger.debug(f"Evaluating expression: {expression!r}")
        try:
            tokens = tokenize(expression)
            if not tokens:
                return 0.0

            postfix = to_postfix(tokens)
            return evaluate_postfix(postfix)

        except CalculatorError as e:
            logger.info(f"Rejected expression {expression!r}: {e.kind}: {e.message}")
            raise

    @classmethod
    def preview(cls, expression: str, last_result: float = 0.0) -> float:
        """
        Evaluate for a live preview, falling back to the last good result.

        Args:
            expression: The expression as currently typed
            last_result: Value to show while the expression does not evaluate

        Returns:
            The evaluated value, 0.0 for blank input, or `last_result`
        """
        if not expression.strip():
            return 0.0
        try:
            return cls.evaluate(expression)
        except CalculatorError:
            return last_result

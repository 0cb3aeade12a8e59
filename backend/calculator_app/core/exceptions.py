"""
Custom exceptions for the application.
"""

from typing import Optional


class CalculatorAppException(Exception):
    """Base exception for calculator application errors."""

    pass


class ConfigurationError(CalculatorAppException):
    """Raised when there's an error in the configuration."""

    pass


class HistoryError(CalculatorAppException):
    """Raised when the history log cannot be persisted."""

    pass


class CalculatorError(CalculatorAppException):
    """Raised when there's an error evaluating a mathematical expression."""

    kind = "CalculatorError"
    default_message = "Invalid expression"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class InvalidNumber(CalculatorError):
    """Raised when a numeric literal is malformed (e.g. "1.2.3" or ".")."""

    kind = "InvalidNumber"
    default_message = "Invalid number"


class NumberTooLarge(CalculatorError):
    """Raised when a numeric literal does not fit in a finite float."""

    kind = "NumberTooLarge"
    default_message = "Number too large"


class UnexpectedCharacter(CalculatorError):
    """Raised when the input holds a character outside the token set."""

    kind = "UnexpectedCharacter"

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"Unexpected character: {character}")

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["character"] = self.character
        return data


class MismatchedParentheses(CalculatorError):
    """Raised when a parenthesis has no matching counterpart."""

    kind = "MismatchedParentheses"
    default_message = "Mismatched parentheses"


class InvalidExpression(CalculatorError):
    """Raised when operators and operands do not line up."""

    kind = "InvalidExpression"
    default_message = "Invalid expression"


class DivisionByZero(CalculatorError):
    """Raised when the divisor is exactly zero."""

    kind = "DivisionByZero"
    default_message = "Division by zero"


class ResultNotFinite(CalculatorError):
    """Raised when an intermediate or final result is NaN or infinite."""

    kind = "ResultNotFinite"
    default_message = "Result not finite"

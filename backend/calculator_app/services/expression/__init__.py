# calculator_app/services/expression/__init__.py
from .tokens import Token, TokenType, OPERATORS
from .tokenizer import tokenize
from .converter import to_postfix, is_unary_position
from .evaluator import evaluate_postfix

__all__ = [
    "Token",
    "TokenType",
    "OPERATORS",
    "tokenize",
    "to_postfix",
    "is_unary_position",
    "evaluate_postfix",
]

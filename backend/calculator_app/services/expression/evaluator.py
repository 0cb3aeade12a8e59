"""
Stack evaluation of postfix token sequences.
"""

import math
import operator
import logging
from typing import List

from .tokens import Token, TokenType, UNARY_MINUS, UNARY_PLUS
from ...core.exceptions import (
    DivisionByZero,
    InvalidExpression,
    ResultNotFinite,
)

logger = logging.getLogger(__name__)

UNARY_FUNCTIONS = {
    UNARY_PLUS: operator.pos,
    UNARY_MINUS: operator.neg,
}

BINARY_FUNCTIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def evaluate_postfix(tokens: List[Token]) -> float:
    """
    Evaluate postfix tokens with an operand stack.

    Args:
        tokens: Tokens in postfix order, as produced by the converter

    Returns:
        The single value left on the stack

    Raises:
        InvalidExpression: If an operator lacks operands or operands are left over
        DivisionByZero: If a divisor is exactly zero
        ResultNotFinite: If any computed value is NaN or infinite
    """
    stack = []

    for token in tokens:
        if token.type is TokenType.NUMBER:
            stack.append(token.value)
            continue

        if token.type is not TokenType.OPERATOR:
            raise InvalidExpression(f"Unexpected token in postfix sequence: {token}")

        if token.is_unary:
            if not stack:
                raise InvalidExpression()
            value = UNARY_FUNCTIONS[token.value](stack.pop())
        else:
            if len(stack) < 2:
                raise InvalidExpression()
            b = stack.pop()
            a = stack.pop()
            if token.value == "/" and b == 0:
                raise DivisionByZero()
            value = BINARY_FUNCTIONS[token.value](a, b)

        if not math.isfinite(value):
            raise ResultNotFinite()
        stack.append(value)

    if len(stack) != 1:
        raise InvalidExpression()

    return stack[0]

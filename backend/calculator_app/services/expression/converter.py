"""
Shunting-yard conversion from infix to postfix (Reverse Polish) order.
"""

import logging
from typing import List, Optional

from .tokens import Associativity, Token, TokenType, UNARY_FORMS
from ...core.exceptions import MismatchedParentheses

logger = logging.getLogger(__name__)


def is_unary_position(previous: Optional[Token]) -> bool:
    """
    Tell whether an operator following `previous` reads as a sign.

    An operator is unary when it opens the expression or directly follows
    another operator or an opening parenthesis.
    """
    if previous is None:
        return True
    return previous.type in (TokenType.OPERATOR, TokenType.LEFT_PAREN)


def should_pop(top: Token, incoming: Token) -> bool:
    """Tell whether the stacked operator `top` must be output before `incoming`."""
    if top.type is not TokenType.OPERATOR:
        return False
    if top.info.precedence > incoming.info.precedence:
        return True
    return (
        top.info.precedence == incoming.info.precedence
        and incoming.info.associativity is Associativity.LEFT
    )


def to_postfix(tokens: List[Token]) -> List[Token]:
    """
    Reorder infix tokens into postfix order.

    Args:
        tokens: Tokens in source order, as produced by the tokenizer

    Returns:
        A new list of tokens in postfix order. Signs are rewritten to the
        unary operators u+ and u-; parentheses are dropped.

    Raises:
        MismatchedParentheses: If an opening or closing parenthesis is unmatched
    """
    output = []
    stack = []
    previous = None

    for token in tokens:
        if token.type is TokenType.NUMBER:
            output.append(token)

        elif token.type is TokenType.LEFT_PAREN:
            stack.append(token)

        elif token.type is TokenType.RIGHT_PAREN:
            while stack and stack[-1].type is not TokenType.LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise MismatchedParentheses()
            stack.pop()

        else:
            incoming = token
            if is_unary_position(previous) and token.value in UNARY_FORMS:
                incoming = Token.operator(UNARY_FORMS[token.value])
            while stack and should_pop(stack[-1], incoming):
                output.append(stack.pop())
            stack.append(incoming)

        previous = token

    while stack:
        token = stack.pop()
        if token.type is TokenType.LEFT_PAREN:
            raise MismatchedParentheses()
        output.append(token)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Postfix: {' '.join(str(t) for t in output)}")
    return output

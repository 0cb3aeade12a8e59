"""
Scanner turning a raw expression string into a list of tokens.
"""

import math
import re
import logging
from typing import List

from .tokens import BINARY_OPERATORS, Token
from ...core.exceptions import InvalidNumber, NumberTooLarge, UnexpectedCharacter

logger = logging.getLogger(__name__)

WHITESPACE_PATTERN = re.compile(r"\s+")
NUMBER_CHARS = frozenset("0123456789.")
# Optional leading digits, optional single decimal point, at least one digit
NUMBER_PATTERN = re.compile(r"[0-9]*\.?[0-9]+")


def tokenize(expression: str) -> List[Token]:
    """
    Scan an expression into tokens.

    Whitespace anywhere in the input is ignored. Operators are emitted with
    their raw symbol; deciding between unary and binary is left to the
    converter.

    Args:
        expression: Raw expression text (e.g. "2 + 3 * (4 - 1)")

    Returns:
        Tokens in source order; empty for empty or whitespace-only input

    Raises:
        InvalidNumber: If a numeric literal is malformed
        NumberTooLarge: If a numeric literal overflows a float
        UnexpectedCharacter: If a character is outside the supported set
    """
    source = WHITESPACE_PATTERN.sub("", expression)
    tokens = []
    i = 0

    while i < len(source):
        ch = source[i]

        if ch in NUMBER_CHARS:
            j = i + 1
            while j < len(source) and source[j] in NUMBER_CHARS:
                j += 1
            tokens.append(_read_number(source[i:j]))
            i = j
            continue

        if ch == "(":
            tokens.append(Token.left_paren())
        elif ch == ")":
            tokens.append(Token.right_paren())
        elif ch in BINARY_OPERATORS:
            tokens.append(Token.operator(ch))
        else:
            raise UnexpectedCharacter(ch)
        i += 1

    logger.debug("Tokenized %r into %d tokens", expression, len(tokens))
    return tokens


def _read_number(raw: str) -> Token:
    if not NUMBER_PATTERN.fullmatch(raw):
        raise InvalidNumber(f"Invalid number: {raw}")

    value = float(raw)
    if not math.isfinite(value):
        raise NumberTooLarge()

    return Token.number(value)

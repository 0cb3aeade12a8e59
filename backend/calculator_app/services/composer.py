"""
Input composition for the calculator keypad.

Each function takes the current expression text and returns the next one,
applying the keypad conveniences: operator replacement, "0." for a bare
decimal point and implicit multiplication before "(" and after ")".
"""

import re
import logging

from ..core.config import settings

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
OPERATOR_CHARS = "+-*/"
SEGMENT_SEPARATORS = re.compile(r"[+\-*/()]")
# Last numeric literal, with no digit anywhere after it
LAST_NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?(?!.*[0-9])")

CLEAR_KEYS = {"clear", "Escape"}
BACKSPACE_KEYS = {"backspace", "Backspace"}
TOGGLE_SIGN_KEYS = {"toggleSign"}


def is_operator(ch: str) -> bool:
    return len(ch) == 1 and ch in OPERATOR_CHARS


def _limit(expression: str, max_length: int = None) -> str:
    max_length = max_length or settings.max_expression_length
    return expression[:max_length]


def append_value(expression: str, value: str, max_length: int = None) -> str:
    """
    Append a keypad value (digit, operator, ".", "(" or ")") to the expression.

    Args:
        expression: Current expression text
        value: The pressed key's value
        max_length: Character limit; defaults to settings.max_expression_length

    Returns:
        The next expression text
    """
    max_length = max_length or settings.max_expression_length
    if not value or len(expression) >= max_length:
        return expression

    last = expression[-1:]

    if is_operator(value):
        if not expression and value != "-":
            return expression
        if is_operator(last):
            return _limit(expression[:-1] + value, max_length)

    if value == ".":
        segment = SEGMENT_SEPARATORS.split(expression)[-1]
        if "." in segment:
            return expression
        if not segment:
            prefix = "*0." if last == ")" else "0."
            return _limit(expression + prefix, max_length)

    if value == "(":
        if last and (last in DIGITS or last == ")"):
            return _limit(expression + "*(", max_length)
        return _limit(expression + "(", max_length)

    if value in DIGITS and last == ")":
        return _limit(expression + "*" + value, max_length)

    return _limit(expression + value, max_length)


def backspace(expression: str) -> str:
    return expression[:-1]


def toggle_sign(expression: str, max_length: int = None) -> str:
    """
    Flip the sign of the last number in the expression.

    A "-" directly before the number counts as its sign only when it sits at
    the start or after an operator or "("; otherwise a new sign is inserted,
    so "3-5" becomes "3--5".
    """
    match = LAST_NUMBER_PATTERN.search(expression)
    if not match:
        if not expression:
            return "-"
        return expression

    start = match.start()
    sign_at = start - 1
    has_sign = (
        sign_at >= 0
        and expression[sign_at] == "-"
        and (sign_at == 0 or expression[sign_at - 1] in OPERATOR_CHARS + "(")
    )
    if has_sign:
        return expression[:sign_at] + expression[start:]
    return _limit(expression[:start] + "-" + expression[start:], max_length)


def apply_key(expression: str, key: str, max_length: int = None) -> str:
    """
    Apply a keypad action or keyboard key to the expression.

    Unknown keys leave the expression unchanged.
    """
    if key in CLEAR_KEYS:
        return ""
    if key in BACKSPACE_KEYS:
        return backspace(expression)
    if key in TOGGLE_SIGN_KEYS:
        return toggle_sign(expression, max_length)
    if len(key) == 1 and key in DIGITS + OPERATOR_CHARS + ".()":
        return append_value(expression, key, max_length)

    logger.debug(f"Ignoring key: {key!r}")
    return expression

# calculator_app/services/expression/tokens.py

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class TokenType(Enum):
    NUMBER = "num"
    OPERATOR = "op"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class OperatorInfo:
    precedence: int
    associativity: Associativity
    arity: int


UNARY_PLUS = "u+"
UNARY_MINUS = "u-"

BINARY_OPERATORS = ("+", "-", "*", "/")

OPERATORS: Dict[str, OperatorInfo] = {
    UNARY_PLUS: OperatorInfo(3, Associativity.RIGHT, 1),
    UNARY_MINUS: OperatorInfo(3, Associativity.RIGHT, 1),
    "*": OperatorInfo(2, Associativity.LEFT, 2),
    "/": OperatorInfo(2, Associativity.LEFT, 2),
    "+": OperatorInfo(1, Associativity.LEFT, 2),
    "-": OperatorInfo(1, Associativity.LEFT, 2),
}

# Binary symbols that may also be read as a sign
UNARY_FORMS = {"+": UNARY_PLUS, "-": UNARY_MINUS}


@dataclass(frozen=True)
class Token:
    """
    A single lexical unit of an arithmetic expression.

    Number tokens carry a float in `value`, operator tokens carry their symbol
    (one of + - * / u+ u-), parenthesis tokens carry nothing.
    """

    type: TokenType
    value: Optional[Union[float, str]] = None

    @classmethod
    def number(cls, value: float) -> "Token":
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        if symbol not in OPERATORS:
            raise ValueError(f"Unknown operator: {symbol}")
        return cls(TokenType.OPERATOR, symbol)

    @classmethod
    def left_paren(cls) -> "Token":
        return cls(TokenType.LEFT_PAREN)

    @classmethod
    def right_paren(cls) -> "Token":
        return cls(TokenType.RIGHT_PAREN)

    @property
    def info(self) -> OperatorInfo:
        return OPERATORS[self.value]

    @property
    def is_unary(self) -> bool:
        return self.type is TokenType.OPERATOR and self.info.arity == 1

    def __str__(self) -> str:
        if self.type is TokenType.NUMBER:
            return repr(self.value)
        if self.type is TokenType.OPERATOR:
            return self.value
        return self.type.value

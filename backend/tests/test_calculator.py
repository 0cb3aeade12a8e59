import pytest
from calculator_app.services.calculator import Calculator
from calculator_app.core.exceptions import (
    CalculatorError,
    DivisionByZero,
    InvalidExpression,
    InvalidNumber,
    MismatchedParentheses,
    UnexpectedCharacter,
)


def test_basic_addition():
    assert Calculator.evaluate("2 + 2") == 4
    assert Calculator.evaluate("0 + 0") == 0
    assert Calculator.evaluate("10 + 20") == 30


def test_basic_subtraction():
    assert Calculator.evaluate("5 - 3") == 2
    assert Calculator.evaluate("0 - 0") == 0
    assert Calculator.evaluate("10 - 20") == -10


def test_basic_multiplication():
    assert Calculator.evaluate("3 * 4") == 12
    assert Calculator.evaluate("0 * 5") == 0
    assert Calculator.evaluate("10 * -2") == -20


def test_basic_division():
    assert Calculator.evaluate("8 / 2") == 4
    assert Calculator.evaluate("10 / 2") == 5
    assert Calculator.evaluate("-6 / 2") == -3


def test_floating_point_operations():
    assert Calculator.evaluate("3.5 + 2.25") == 5.75
    assert Calculator.evaluate("10.5 / 2") == 5.25
    assert abs(Calculator.evaluate("1 / 3") - 0.3333333333333333) < 1e-10


def test_unary_operators():
    assert Calculator.evaluate("-5") == -5
    assert Calculator.evaluate("-(3 + 4)") == -7
    assert Calculator.evaluate("-(-5)") == 5
    assert Calculator.evaluate("--5") == 5
    assert Calculator.evaluate("3*-2") == -6
    assert Calculator.evaluate("+5") == 5
    assert Calculator.evaluate("2*-(1+1)") == -4


def test_complex_expressions():
    assert Calculator.evaluate("2 + 3 * 4") == 14
    assert Calculator.evaluate("(2 + 3) * 4") == 20
    assert Calculator.evaluate("10 / 2 + 3") == 8
    assert Calculator.evaluate("((1 + 2) * (3 + 4)) / 7") == 3


def test_left_associativity():
    assert Calculator.evaluate("10 - 2 - 3") == 5
    assert Calculator.evaluate("100 / 10 / 5") == 2


def test_empty_input_is_zero():
    assert Calculator.evaluate("") == 0
    assert Calculator.evaluate("   ") == 0


def test_result_is_float():
    assert isinstance(Calculator.evaluate("2 + 2"), float)


def test_deterministic():
    results = {Calculator.evaluate("0.1 + 0.2 * 3 - 7 / 9") for _ in range(5)}
    assert len(results) == 1


def test_division_by_zero():
    with pytest.raises(DivisionByZero):
        Calculator.evaluate("5 / 0")

    with pytest.raises(DivisionByZero):
        Calculator.evaluate("1 / (2 - 2)")


def test_mismatched_parentheses():
    with pytest.raises(MismatchedParentheses):
        Calculator.evaluate("(1 + 2")

    with pytest.raises(MismatchedParentheses):
        Calculator.evaluate("1 + 2)")


def test_invalid_expressions():
    with pytest.raises(InvalidExpression):
        Calculator.evaluate("2 + ")

    with pytest.raises(InvalidExpression):
        Calculator.evaluate("()")

    with pytest.raises(InvalidExpression):
        Calculator.evaluate("(2)(3)")

    with pytest.raises(InvalidNumber):
        Calculator.evaluate("1.2.3 + 1")


def test_unsupported_operations():
    with pytest.raises(InvalidExpression):
        Calculator.evaluate("2 ** 3")  # Power operation not supported

    with pytest.raises(UnexpectedCharacter):
        Calculator.evaluate("2 % 3")  # Modulo operation not supported


def test_non_mathematical_expressions():
    with pytest.raises(CalculatorError):
        Calculator.evaluate("print(2)")

    with pytest.raises(CalculatorError):
        Calculator.evaluate("'2' + '2'")

    with pytest.raises(CalculatorError):
        Calculator.evaluate("import os")


def test_error_kinds():
    with pytest.raises(UnexpectedCharacter) as exc_info:
        Calculator.evaluate("2&3")
    assert exc_info.value.to_dict() == {
        "kind": "UnexpectedCharacter",
        "message": "Unexpected character: &",
        "character": "&",
    }


def test_preview_falls_back_to_last_result():
    assert Calculator.preview("2 + 3", last_result=1) == 5
    assert Calculator.preview("2 +", last_result=5) == 5
    assert Calculator.preview("1 / 0", last_result=7) == 7
    assert Calculator.preview("  ", last_result=7) == 0


def test_error_messages():
    assert InvalidExpression().message == "Invalid expression"
    assert DivisionByZero().to_dict() == {
        "kind": "DivisionByZero",
        "message": "Division by zero",
    }
    assert str(InvalidNumber("Invalid number: 1.2.3")) == "Invalid number: 1.2.3"

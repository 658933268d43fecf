import math

import pytest

from core import (
    evaluate_expression, lex, Integer, Decimal, EvalError, EvalErrorReason,
    LexError, UnbalancedParenError
)


class TestEvaluateExpression:

    @pytest.mark.parametrize("expression,expected", [
        ("(1+2)*3", 9),
        ("1+2*3", 7),
        ("-3+4", 1),
        ("3-4", -1),
        ("3-(-4)", 7),
        ("2*3", 6),
        ("10-3", 7),
        ("2^10", 1024),
        ("2^0", 1),
        ("7/-2", -3),
        ("2^3^2", 512),
        ("-(2+3)*+4", -20),
        ("((((5))))", 5),
    ])
    def test_integer_results(self, expression, expected):
        assert evaluate_expression(expression) == Integer(expected)

    @pytest.mark.parametrize("expression", [
        "1+2-3*4",
        "(8-3)*(2+7)-6",
        "2*(3+(4-1)*5)^2",
        "12*12-11*13+1",
        "3^4-4^3",
        "-(-(-7))*2",
    ])
    def test_matches_reference_arithmetic(self, expression):
        reference = eval(expression.replace('^', '**'))
        assert evaluate_expression(expression) == Integer(reference)

    def test_left_associative_power(self):
        assert evaluate_expression("2^3^2", right_associative_power=False) == Integer(64)

    def test_type_promotion(self):
        assert evaluate_expression("1+2.5") == Decimal(3.5)
        assert evaluate_expression("2^-1") == Decimal(0.5)
        assert evaluate_expression("3*1.0") == Decimal(3.0)

    def test_decimal_division_by_zero(self):
        assert evaluate_expression("1.0/0") == Decimal(math.inf)
        with pytest.raises(EvalError):
            evaluate_expression("1.0/0", strict_decimal_division=True)

    @pytest.mark.parametrize("expression", ["42", "-17", "2^40", "0"])
    def test_integer_result_relexes_to_same_value(self, expression):
        result = evaluate_expression(expression)
        assert evaluate_expression(str(result.value)) == result
        assert lex(str(abs(result.value))) == [Integer(abs(result.value))]

    def test_unbalanced(self):
        with pytest.raises(UnbalancedParenError):
            evaluate_expression("(1+2")

    @pytest.mark.parametrize("expression,reason", [
        ("1/0", EvalErrorReason.DIVISION_BY_ZERO),
        ("2^1.5", EvalErrorReason.INVALID_EXPONENT),
        ("", EvalErrorReason.MALFORMED_EXPRESSION),
        ("()", EvalErrorReason.MALFORMED_EXPRESSION),
        ("(1)(2)", EvalErrorReason.MALFORMED_EXPRESSION),
        ("1+", EvalErrorReason.STACK_UNDERFLOW),
        ("-", EvalErrorReason.STACK_UNDERFLOW),
    ])
    def test_eval_errors(self, expression, reason):
        with pytest.raises(EvalError) as excinfo:
            evaluate_expression(expression)
        assert excinfo.value.reason is reason

    def test_lex_error_propagates(self):
        with pytest.raises(LexError):
            evaluate_expression("1+x")

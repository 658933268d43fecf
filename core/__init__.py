"""核心模块 - Token系统、词法分析、后缀转换与RPN求值"""
from .token_system import (
    TokenType, Token, Integer, Decimal, BinaryOperator, UnaryOperator,
    LeftParen, RightParen, SEPARATORS, OPERATOR_SYMBOLS, UNARY_SYMBOLS,
    describe_token, describe_sequence
)
from .exceptions import (
    ExpressionError, LexError, UnbalancedParenError, EvalError, EvalErrorReason
)
from .lexer import lex
from .converter import ShuntingYardConverter, to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators


def evaluate_expression(expression, right_associative_power=True,
                        strict_decimal_division=False, max_exponent=None):
    """文本 -> Token -> 后缀 -> 结果Token；每次调用互不影响"""
    tokens = lex(expression)
    postfix = to_postfix(tokens, right_associative_power)
    evaluator = RPNEvaluator(strict_decimal_division=strict_decimal_division,
                             max_exponent=max_exponent)
    return evaluator.evaluate(postfix)


__all__ = [
    'TokenType', 'Token', 'Integer', 'Decimal', 'BinaryOperator', 'UnaryOperator',
    'LeftParen', 'RightParen', 'SEPARATORS', 'OPERATOR_SYMBOLS', 'UNARY_SYMBOLS',
    'describe_token', 'describe_sequence',
    'ExpressionError', 'LexError', 'UnbalancedParenError', 'EvalError', 'EvalErrorReason',
    'lex', 'ShuntingYardConverter', 'to_postfix', 'RPNEvaluator', 'Operators',
    'evaluate_expression'
]

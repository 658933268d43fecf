"""core/exceptions.py - 词法、括号与求值错误"""
from enum import Enum


class EvalErrorReason(Enum):
    STACK_UNDERFLOW = "stack_underflow"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_EXPONENT = "invalid_exponent"
    MALFORMED_EXPRESSION = "malformed_expression"


class ExpressionError(Exception):
    """所有表达式错误的基类"""
    kind = "EXPRESSION"


class LexError(ExpressionError):
    kind = "LEX"

    def __init__(self, message, text="", position=None):
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)
        self.text = text
        self.position = position


class UnbalancedParenError(ExpressionError):
    kind = "UNBALANCED_PAREN"


class EvalError(ExpressionError):
    kind = "EVAL"

    def __init__(self, reason, message=None):
        self.reason = EvalErrorReason(reason)
        super().__init__(message or self.reason.value.replace('_', ' '))

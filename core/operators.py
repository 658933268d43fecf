"""core/operators.py"""
import logging
import math

import numpy as np

from core.exceptions import EvalError, EvalErrorReason
from core.token_system import Integer, Decimal

logger = logging.getLogger(__name__)


def _to_float(value):
    """Integer 载荷拓宽为 float64；超出 double 范围时取带符号无穷大"""
    try:
        return np.float64(value)
    except OverflowError:
        return np.float64(math.inf if value > 0 else -math.inf)


def _promote(lhs, rhs):
    """类型提升：任一操作数为 Decimal 时两边都转为 float64"""
    if isinstance(lhs, Decimal) or isinstance(rhs, Decimal):
        return True, _to_float(lhs.value), _to_float(rhs.value)
    return False, lhs.value, rhs.value


class Operators:
    """所有操作符的静态方法集合"""

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        if isinstance(operand, Integer):
            return Integer(-operand.value)
        return Decimal(-operand.value)

    @staticmethod
    def pos(operand):
        return operand

    # 二元操作符========================================

    @staticmethod
    def add(lhs, rhs):
        promoted, x, y = _promote(lhs, rhs)
        if promoted:
            with np.errstate(all='ignore'):
                return Decimal(float(x + y))
        return Integer(x + y)

    @staticmethod
    def sub(lhs, rhs):
        promoted, x, y = _promote(lhs, rhs)
        if promoted:
            with np.errstate(all='ignore'):
                return Decimal(float(x - y))
        return Integer(x - y)

    @staticmethod
    def mul(lhs, rhs):
        promoted, x, y = _promote(lhs, rhs)
        if promoted:
            with np.errstate(all='ignore'):
                return Decimal(float(x * y))
        return Integer(x * y)

    @staticmethod
    def div(lhs, rhs, strict=False):
        """
        除法
        - Integer / Integer：向零截断，除数为 0 时报 DIVISION_BY_ZERO
        - 含 Decimal：IEEE 语义（inf / nan），strict=True 时同样报错
        """
        promoted, x, y = _promote(lhs, rhs)
        if promoted:
            if strict and y == 0:
                raise EvalError(EvalErrorReason.DIVISION_BY_ZERO, "Division by zero")
            with np.errstate(all='ignore'):
                return Decimal(float(np.divide(x, y)))

        if y == 0:
            raise EvalError(EvalErrorReason.DIVISION_BY_ZERO, "Integer division by zero")
        quotient = abs(x) // abs(y)
        return Integer(quotient if (x < 0) == (y < 0) else -quotient)

    @staticmethod
    def pow(base, exponent, strict=False, max_exponent=None):
        """
        平方求幂

        指数必须是 Integer；负指数先算正指数结果再取倒数，结果总是 Decimal。
        指数为 0 时返回与底数同类型的 1。
        """
        if not isinstance(exponent, Integer):
            raise EvalError(EvalErrorReason.INVALID_EXPONENT,
                            f"Exponent must be an integer, got {exponent.value}")
        n = exponent.value
        if max_exponent is not None and abs(n) > max_exponent:
            raise EvalError(EvalErrorReason.INVALID_EXPONENT,
                            f"Exponent {n} exceeds the limit of {max_exponent}")

        if isinstance(base, Integer):
            result, square = 1, base.value
        else:
            result, square = np.float64(1.0), np.float64(base.value)

        magnitude = abs(n)
        with np.errstate(all='ignore'):
            while magnitude:
                if magnitude & 1:
                    result = result * square
                magnitude >>= 1
                if magnitude:
                    square = square * square

            if n < 0:
                denominator = _to_float(result)
                if strict and denominator == 0:
                    raise EvalError(EvalErrorReason.DIVISION_BY_ZERO,
                                    "Zero raised to a negative power")
                return Decimal(float(np.divide(np.float64(1.0), denominator)))

        if isinstance(base, Integer):
            return Integer(result)
        return Decimal(float(result))


UNARY_FUNCTIONS = {
    '-': Operators.neg,
    '+': Operators.pos,
}

BINARY_FUNCTIONS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
}

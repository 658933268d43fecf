"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.exceptions import EvalError, EvalErrorReason
from core.operators import Operators, UNARY_FUNCTIONS, BINARY_FUNCTIONS
from core.token_system import BinaryOperator, UnaryOperator, is_numeric, describe_token

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀Token序列的值"""

    def __init__(self, strict_decimal_division=False, max_exponent=None):
        """
        Args:
            strict_decimal_division: Decimal 除以 0 时是否报错（默认返回 inf/nan）
            max_exponent: 允许的最大指数绝对值，None 表示不限制
        """
        self.strict_decimal_division = strict_decimal_division
        self.max_exponent = max_exponent

    @staticmethod
    def _pop(stack, token):
        if not stack:
            raise EvalError(EvalErrorReason.STACK_UNDERFLOW,
                            f"Insufficient operands for {describe_token(token)}")
        return stack.pop()

    def _apply_binary(self, symbol, lhs, rhs):
        if symbol == '/':
            return Operators.div(lhs, rhs, strict=self.strict_decimal_division)
        if symbol == '^':
            return Operators.pow(lhs, rhs, strict=self.strict_decimal_division,
                                 max_exponent=self.max_exponent)
        return BINARY_FUNCTIONS[symbol](lhs, rhs)

    def evaluate(self, postfix):
        """
        Args:
            postfix: 后缀顺序的Token序列
        Returns:
            Integer 或 Decimal Token
        Raises:
            EvalError: 栈下溢、除零、非法指数或最终栈大小不为 1
        """
        stack = []

        for token in postfix:
            if is_numeric(token):
                stack.append(token)

            # ================== 一元操作符处理 ==================
            elif isinstance(token, UnaryOperator):
                operand = self._pop(stack, token)
                stack.append(UNARY_FUNCTIONS[token.symbol](operand))

            # ================== 二元操作符处理 ==================
            elif isinstance(token, BinaryOperator):
                rhs = self._pop(stack, token)
                lhs = self._pop(stack, token)
                stack.append(self._apply_binary(token.symbol, lhs, rhs))

            else:
                raise EvalError(EvalErrorReason.MALFORMED_EXPRESSION,
                                f"Unexpected {describe_token(token)} in postfix sequence")

        if len(stack) != 1:
            logger.debug("Stack has %d elements after evaluation, expected 1", len(stack))
            if not stack:
                raise EvalError(EvalErrorReason.MALFORMED_EXPRESSION, "Empty expression")
            raise EvalError(EvalErrorReason.MALFORMED_EXPRESSION,
                            f"Expression leaves {len(stack)} values on the stack")

        result = stack[0]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Result: %s", describe_token(result))
        return result

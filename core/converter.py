"""core/converter.py - 中缀Token序列转后缀（调度场算法）"""
import logging

from core.exceptions import UnbalancedParenError
from core.token_system import (
    UnaryOperator, LeftParen, RightParen, is_numeric, is_operator,
    describe_sequence
)

logger = logging.getLogger(__name__)


class ShuntingYardConverter:
    """基于操作符优先级栈的中缀到后缀转换"""

    def __init__(self, right_associative_power=True):
        """
        Args:
            right_associative_power: True 时 2^3^2 = 2^(3^2)；
                False 时对所有二元操作符采用“优先级>=即出栈”的左结合规则
        """
        self.right_associative_power = right_associative_power

    def _is_right_associative(self, token):
        # 一元操作符是前缀形式，入栈时不能弹出其他一元操作符
        if isinstance(token, UnaryOperator):
            return True
        return token.symbol == '^' and self.right_associative_power

    def _should_pop(self, top, token):
        if not is_operator(top):
            return False
        if top.precedence > token.precedence:
            return True
        return top.precedence == token.precedence and not self._is_right_associative(token)

    def convert(self, tokens):
        stack = []
        postfix = []

        for token in tokens:
            if is_numeric(token):
                postfix.append(token)
            elif isinstance(token, LeftParen):
                stack.append(token)
            elif isinstance(token, RightParen):
                while stack and not isinstance(stack[-1], LeftParen):
                    postfix.append(stack.pop())
                if not stack:
                    raise UnbalancedParenError("Closing parenthesis without a matching '('")
                stack.pop()
            else:
                while stack and self._should_pop(stack[-1], token):
                    postfix.append(stack.pop())
                stack.append(token)

        while stack:
            token = stack.pop()
            if isinstance(token, LeftParen):
                raise UnbalancedParenError("Opening parenthesis is never closed")
            postfix.append(token)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Postfix: %s", describe_sequence(postfix))
        return postfix


def to_postfix(tokens, right_associative_power=True):
    return ShuntingYardConverter(right_associative_power).convert(tokens)

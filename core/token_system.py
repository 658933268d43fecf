"""core/token_system.py"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Union


class TokenType(Enum):
    INTEGER = "integer"
    DECIMAL = "decimal"
    BINARY_OPERATOR = "binary_operator"
    UNARY_OPERATOR = "unary_operator"
    L_PAREN = "l_paren"
    R_PAREN = "r_paren"


# 分隔符与操作符集合（只读常量）
OPERATOR_SYMBOLS = frozenset('+-*/^')
UNARY_SYMBOLS = frozenset('+-')
SEPARATORS = OPERATOR_SYMBOLS | frozenset('()')

# 优先级表：数值越大结合越紧
BINARY_PRECEDENCE = MappingProxyType({
    '+': 1,
    '-': 1,
    '*': 2,
    '/': 2,
    '^': 3,
})
UNARY_PRECEDENCE = 4


@dataclass(frozen=True)
class Integer:
    value: int

    @property
    def type(self):
        return TokenType.INTEGER


@dataclass(frozen=True)
class Decimal:
    value: float

    @property
    def type(self):
        return TokenType.DECIMAL


@dataclass(frozen=True)
class BinaryOperator:
    symbol: str

    def __post_init__(self):
        if self.symbol not in OPERATOR_SYMBOLS:
            raise ValueError(f"Unknown binary operator: {self.symbol!r}")

    @property
    def type(self):
        return TokenType.BINARY_OPERATOR

    @property
    def precedence(self):
        return BINARY_PRECEDENCE[self.symbol]


@dataclass(frozen=True)
class UnaryOperator:
    symbol: str

    def __post_init__(self):
        if self.symbol not in UNARY_SYMBOLS:
            raise ValueError(f"Unknown unary operator: {self.symbol!r}")

    @property
    def type(self):
        return TokenType.UNARY_OPERATOR

    @property
    def precedence(self):
        return UNARY_PRECEDENCE


@dataclass(frozen=True)
class LeftParen:

    @property
    def type(self):
        return TokenType.L_PAREN


@dataclass(frozen=True)
class RightParen:

    @property
    def type(self):
        return TokenType.R_PAREN


Token = Union[Integer, Decimal, BinaryOperator, UnaryOperator, LeftParen, RightParen]

NUMERIC_TYPES = (Integer, Decimal)
OPERATOR_TYPES = (BinaryOperator, UnaryOperator)


def is_numeric(token):
    return isinstance(token, NUMERIC_TYPES)


def is_operator(token):
    return isinstance(token, OPERATOR_TYPES)


def _render_value(value):
    # 超过解释器 int->str 位数上限的整数只记录位长
    try:
        return str(value)
    except ValueError:
        return f"<{value.bit_length()}-bit integer>"


def describe_token(token):
    """
    将Token渲染为 "类型: 载荷" 形式，用于调试日志
    例如 INTEGER: 3 / BINARY OPERATOR: + / L_PAREN: (
    """
    if isinstance(token, NUMERIC_TYPES):
        return f"{token.type.name}: {_render_value(token.value)}"
    if isinstance(token, OPERATOR_TYPES):
        return f"{token.type.name.replace('_', ' ')}: {token.symbol}"
    if isinstance(token, LeftParen):
        return f"{token.type.name}: ("
    return f"{token.type.name}: )"


def describe_sequence(tokens):
    """把Token序列压缩成一行，便于记录中缀/后缀顺序"""
    parts = []
    for token in tokens:
        if isinstance(token, NUMERIC_TYPES):
            parts.append(_render_value(token.value))
        elif isinstance(token, UnaryOperator):
            parts.append(f"u{token.symbol}")
        elif isinstance(token, BinaryOperator):
            parts.append(token.symbol)
        elif isinstance(token, LeftParen):
            parts.append('(')
        else:
            parts.append(')')
    return ' '.join(parts)

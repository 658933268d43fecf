"""core/lexer.py - 将表达式文本切分为Token序列"""
import logging
import re

from core.exceptions import LexError
from core.token_system import (
    SEPARATORS, UNARY_SYMBOLS, Integer, Decimal, BinaryOperator,
    UnaryOperator, LeftParen, RightParen, is_operator, describe_sequence
)

logger = logging.getLogger(__name__)

_INTEGER_LITERAL = re.compile(r'[0-9]+')
_DECIMAL_LITERAL = re.compile(r'[0-9]+\.[0-9]*|\.[0-9]+')


def classify_lexeme(lexeme, position=None):
    """
    把一个词素归类为 Integer 或 Decimal

    Args:
        lexeme: 两个分隔符之间收集到的字符
        position: 词素在原表达式中的起始位置（仅用于报错）
    Returns:
        Integer 或 Decimal Token
    Raises:
        LexError: 既不是无符号整数也不是无符号小数
    """
    if _INTEGER_LITERAL.fullmatch(lexeme):
        try:
            return Integer(int(lexeme))
        except ValueError as e:
            # 解释器对 int/str 互转有位数上限
            raise LexError(f"Integer literal too long ({len(lexeme)} digits): {e}", lexeme, position) from e
    if _DECIMAL_LITERAL.fullmatch(lexeme):
        return Decimal(float(lexeme))
    raise LexError(f"Invalid numeric literal {lexeme!r}", lexeme, position)


def _starts_operand(tokens):
    # 表达式开头、操作符或左括号之后的符号是一元的
    if not tokens:
        return True
    last = tokens[-1]
    return is_operator(last) or isinstance(last, LeftParen)


def classify_separator(char, tokens, position=None):
    if char == '(':
        return LeftParen()
    if char == ')':
        return RightParen()
    if _starts_operand(tokens):
        if char not in UNARY_SYMBOLS:
            raise LexError(f"Operator {char!r} cannot be used as a unary operator", char, position)
        return UnaryOperator(char)
    return BinaryOperator(char)


def lex(expression):
    """
    扫描表达式，输出有序Token列表

    空白字符不会被跳过：出现在数字中的空格会导致 LexError。
    空输入返回空列表，由求值阶段拒绝。
    """
    tokens = []
    lexeme = ''
    lexeme_start = 0

    for i, char in enumerate(expression):
        if char in SEPARATORS:
            if lexeme:
                tokens.append(classify_lexeme(lexeme, lexeme_start))
                lexeme = ''
            tokens.append(classify_separator(char, tokens, i))
        else:
            if not lexeme:
                lexeme_start = i
            lexeme += char

    if lexeme:
        tokens.append(classify_lexeme(lexeme, lexeme_start))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Lexed %d tokens: %s", len(tokens), describe_sequence(tokens))
    return tokens

import logging
from typing import Iterable, List

import pandas as pd

from core import evaluate_expression, ExpressionError
from utils.formatting import error_kind

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'kind', 'value', 'error']


class BatchEvaluator:
    """逐条求值多个表达式，错误记录在结果行中而不中断整批"""

    def __init__(self, right_associative_power=True, strict_decimal_division=False,
                 max_exponent=None):
        self.right_associative_power = right_associative_power
        self.strict_decimal_division = strict_decimal_division
        self.max_exponent = max_exponent

    def evaluate_one(self, expression: str) -> dict:
        try:
            token = evaluate_expression(
                expression,
                right_associative_power=self.right_associative_power,
                strict_decimal_division=self.strict_decimal_division,
                max_exponent=self.max_exponent
            )
        except ExpressionError as e:
            logger.error(f"Error evaluating expression '{expression[:50]}': {e}")
            return {'expression': expression, 'kind': None, 'value': None, 'error': error_kind(e)}

        return {'expression': expression, 'kind': token.type.name, 'value': token.value, 'error': None}

    def evaluate_many(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        Args:
            expressions: 表达式字符串序列
        Returns:
            DataFrame，列为 expression / kind / value / error；
            value 列保持 object 类型，Integer 结果不会被转成 float
        """
        rows = [self.evaluate_one(expression) for expression in expressions]
        frame = pd.DataFrame({
            column: pd.Series([row[column] for row in rows], dtype=object)
            for column in RESULT_COLUMNS
        })
        logger.info(f"Evaluated {len(frame)} expressions, {int(frame['error'].notna().sum())} failed")
        return frame

    def evaluate_file(self, file_path: str) -> pd.DataFrame:
        """每行一个表达式；去掉首尾空白并跳过空行"""
        logger.info(f"Loading expressions from {file_path}")
        expressions: List[str] = []
        with open(file_path, 'r', encoding='utf-8') as f:
            for line in f:
                expression = line.strip()
                if expression:
                    expressions.append(expression)
        return self.evaluate_many(expressions)


def summary(frame: pd.DataFrame) -> dict:
    """成功/失败数量以及各错误类型计数"""
    failed = frame['error'].notna()
    return {
        'total': int(len(frame)),
        'ok': int((~failed).sum()),
        'failed': int(failed.sum()),
        'errors': {kind: int(count) for kind, count in frame.loc[failed, 'error'].value_counts().items()},
    }


"""批量求值模块"""
from .evaluator import BatchEvaluator, summary

__all__ = ['BatchEvaluator', 'summary']

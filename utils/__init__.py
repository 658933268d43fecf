"""工具模块"""
from .formatting import format_result, format_error, format_value, render_result, error_kind

__all__ = ['format_result', 'format_error', 'format_value', 'render_result', 'error_kind']

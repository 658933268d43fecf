"""utils/formatting.py"""
from config.config import OUTPUT_CONFIG
from core.exceptions import EvalError


def format_value(value):
    return str(value)


def render_result(kind, value, template=None):
    """按类型名与数值渲染一行结果，单条和批量输出共用"""
    template = template or OUTPUT_CONFIG["result_format"]
    return template.format(kind=kind, value=format_value(value))


def format_result(token, template=None):
    """Integer/Decimal Token -> Type:[INTEGER] Value[7]"""
    return render_result(token.type.name, token.value, template)


def error_kind(exc):
    if isinstance(exc, EvalError):
        return f"{exc.kind}:{exc.reason.name}"
    return exc.kind


def format_error(exc, template=None):
    template = template or OUTPUT_CONFIG["error_format"]
    return template.format(kind=error_kind(exc), message=str(exc))

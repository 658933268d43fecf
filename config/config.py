"""配置文件"""

# 后缀转换参数
PARSER_CONFIG = {
    # True: 2^3^2 = 2^(3^2) = 512；False: 按“优先级>=即出栈”左结合，得到 64
    "right_associative_power": True,
}

# 求值参数
EVALUATOR_CONFIG = {
    "strict_decimal_division": False,  # Decimal 除零默认遵循 IEEE（inf/nan）
    "max_exponent": 100000,  # 指数绝对值上限，避免超大整数幂
}

# 输出格式
OUTPUT_CONFIG = {
    "result_format": "Type:[{kind}] Value[{value}]",
    "error_format": "Error:[{kind}] {message}",
}

# 退出码
EXIT_CODES = {
    "ok": 0,
    "io_error": 1,
    "lex_error": 2,
    "unbalanced_paren": 3,
    "eval_error": 4,
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(PARSER_CONFIG["right_associative_power"], bool), "right_associative_power 必须是布尔值"
    max_exponent = EVALUATOR_CONFIG["max_exponent"]
    assert max_exponent is None or max_exponent >= 0, "max_exponent 不能为负数"
    assert EXIT_CODES["ok"] == 0, "成功退出码必须为 0"
    assert len(set(EXIT_CODES.values())) == len(EXIT_CODES), "退出码不能重复"
    return True

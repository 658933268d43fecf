"""主程序入口 - 读取一行表达式并输出结果"""
import argparse
import logging
import sys

from config.config import *
from core import (
    evaluate_expression, ExpressionError, LexError, UnbalancedParenError
)
from batch import BatchEvaluator, summary
from utils.formatting import format_result, format_error, render_result

logger = logging.getLogger(__name__)


def exit_code_for(exc):
    if isinstance(exc, LexError):
        return EXIT_CODES["lex_error"]
    if isinstance(exc, UnbalancedParenError):
        return EXIT_CODES["unbalanced_paren"]
    return EXIT_CODES["eval_error"]


def allow_large_integers():
    """解除 int/str 互转的 4300 位上限，使任意大小的 Integer 结果都能输出"""
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


def read_expression(stream):
    """读取一行；只去掉行尾换行符，不做其他裁剪"""
    line = stream.readline()
    if not line:
        return None
    return line.rstrip('\r\n')


def run_single(expression, args):
    try:
        result = evaluate_expression(
            expression,
            right_associative_power=args.right_associative_power,
            strict_decimal_division=args.strict_division,
            max_exponent=EVALUATOR_CONFIG["max_exponent"]
        )
    except ExpressionError as e:
        logger.error(f"Failed to evaluate '{expression}': {e}")
        print(format_error(e), file=sys.stderr)
        return exit_code_for(e)

    print(format_result(result))
    return EXIT_CODES["ok"]


def run_batch(args):
    evaluator = BatchEvaluator(
        right_associative_power=args.right_associative_power,
        strict_decimal_division=args.strict_division,
        max_exponent=EVALUATOR_CONFIG["max_exponent"]
    )
    try:
        frame = evaluator.evaluate_file(args.input_file)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {args.input_file}: {e}")
        print(f"Error:[IO] {e}", file=sys.stderr)
        return EXIT_CODES["io_error"]

    for row in frame.itertuples(index=False):
        if not isinstance(row.error, str):
            line = render_result(row.kind, row.value)
        else:
            line = f"Error:[{row.error}]"
        print(f"{row.expression} => {line}")

    if args.output_path:
        logger.info(f"Saving results to {args.output_path}")
        frame.to_csv(args.output_path, index=False)

    stats = summary(frame)
    logger.info(f"Batch finished: {stats['ok']} ok, {stats['failed']} failed")
    for kind, count in stats['errors'].items():
        logger.info(f"  {kind}: {count}")
    return EXIT_CODES["ok"] if stats['failed'] == 0 else EXIT_CODES["io_error"]


def main(args, stdin=None):
    validate_config()
    allow_large_integers()

    if args.input_file:
        return run_batch(args)

    if args.expression is not None:
        expression = args.expression
    else:
        try:
            expression = read_expression(stdin or sys.stdin)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read standard input: {e}")
            print(f"Error:[IO] {e}", file=sys.stderr)
            return EXIT_CODES["io_error"]
        if expression is None:
            logger.error("No expression on standard input")
            print("Error:[IO] no input", file=sys.stderr)
            return EXIT_CODES["io_error"]

    return run_single(expression, args)


def build_parser():
    parser = argparse.ArgumentParser(description="Arithmetic expression evaluator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Expression to evaluate (default: read one line from stdin)"
    )
    parser.add_argument(
        "--input_file",
        type=str,
        default=None,
        help="Evaluate every non-blank line of this file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Save batch results to this CSV file"
    )
    parser.add_argument(
        "--right_assoc_power",
        dest="right_associative_power",
        action="store_true",
        help="Evaluate 2^3^2 as 2^(3^2)"
    )
    parser.add_argument(
        "--left_assoc_power",
        dest="right_associative_power",
        action="store_false",
        help="Evaluate 2^3^2 as (2^3)^2"
    )
    parser.add_argument(
        "--strict_division",
        action="store_true",
        default=EVALUATOR_CONFIG["strict_decimal_division"],
        help="Treat decimal division by zero as an error instead of inf/nan"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log token streams and postfix order"
    )
    parser.set_defaults(right_associative_power=PARSER_CONFIG["right_associative_power"])
    return parser


def cli():
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=logging.DEBUG if args.debug else getattr(logging, LOGGING_CONFIG["level"]),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))


if __name__ == "__main__":
    cli()

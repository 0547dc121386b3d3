"""
Command-line entrypoint of the arithmetic calculator.

This script:
- Reads one expression, from the arguments or from one line of standard input
- Prints its value to stdout, or the error to stderr

The exit status is 0 on success and 1 when the expression could not be evaluated.
"""

import argparse
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, ValidationError

from arithmetic_calculator.common.errors import CalculatorError
from arithmetic_calculator.common.logger import configure_logging, logger
from arithmetic_calculator.pipeline.calculator import calculate, render


# Options recognized before the expression; anything else starts the expression
HELP_FLAGS: tuple = ("-h", "--help")
LOG_LEVEL_FLAG: str = "--log-level"


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : Optional[str]
        Expression to evaluate; read from standard input when None.
    log_level : str
        Level of the diagnostics written to stderr.
    """

    expression: Optional[str] = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


def separate_expression(argv: List[str]) -> List[str]:
    """
    Insert '--' in front of the expression so that argparse never reads it as an option.

    Without it, "-3*2" or "-(4-5)" would be rejected as unknown options.

    :param List[str] argv: Raw command-line arguments

    :return: Arguments with the expression placed after '--'
    :rtype: List[str]
    """
    separated: List[str] = []
    index = 0
    while index < len(argv):
        token = argv[index]
        if token == "--":
            return separated + argv[index:]
        if token == LOG_LEVEL_FLAG:
            separated.extend(argv[index:index + 2])
            index += 2
        elif token in HELP_FLAGS or token.startswith(f"{LOG_LEVEL_FLAG}="):
            separated.append(token)
            index += 1
        else:
            return separated + ["--"] + argv[index:]
    return separated


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param Optional[List[str]] argv: Arguments, sys.argv[1:] when None

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Evaluate an arithmetic expression made of numbers, + - * /, parentheses and unary minus"
    )

    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression to evaluate, its words joined by spaces; read from standard input when omitted",
    )
    parser.add_argument(
        LOG_LEVEL_FLAG,
        default="WARNING",
        type=str.upper,
        help="Diagnostics level: DEBUG, INFO, WARNING or ERROR",
    )

    args = parser.parse_args(separate_expression(sys.argv[1:] if argv is None else argv))
    expression = " ".join(args.expression) if args.expression else None

    try:
        return CliArgs(expression=expression, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def run_single(expression: str) -> int:
    """
    Evaluate one expression and print its value or error.

    :param str expression: Arithmetic expression

    :return: Process exit status
    :rtype: int
    """
    try:
        value = calculate(expression)
    except CalculatorError as exc:
        logger.info("🧮❌ Could not evaluate %r: %s", expression, exc)
        print(exc, file=sys.stderr)
        return 1

    print(render(value))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the command-line tool.
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    expression = cli_args.expression
    if expression is None:
        expression = sys.stdin.readline().rstrip("\r\n")
    return run_single(expression)


if __name__ == "__main__":
    sys.exit(main())

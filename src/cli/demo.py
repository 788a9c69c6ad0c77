"""Demo — читает два операнда, печатает их сумму.

Usage:
    python -m src.cli [A] [B] [--arbitrary-length] [-v]

Операнды без аргументов запрашиваются из stdin. Пустой ввод (EOF)
считается "0".

Exit codes:
    0 - сумма напечатана
    1 - ошибка разбора операнда
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from src.core.domain import BigInteger
from src.core.math import BigIntegerError, DecimalParseConfig

logger = logging.getLogger(__name__)

FIRST_PROMPT = "Enter the first big integer:"
SECOND_PROMPT = "Enter the second big integer:"


def read_operand(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    """Печать приглашения и чтение одной строки; EOF → "0"."""
    print(prompt, file=stdout)
    line = stdin.readline()
    if not line:
        logger.debug("EOF while reading operand, defaulting to 0")
        return "0"
    return line.rstrip("\r\n")


def run_sum(first: str, second: str, config: Optional[DecimalParseConfig] = None) -> BigInteger:
    """Разбор обоих операндов и их сложение."""
    a = BigInteger.from_string(first, config)
    b = BigInteger.from_string(second, config)
    logger.debug("Operands parsed: a=%r b=%r", a, b)
    return a.add(b)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.cli",
        description="Add two arbitrary-precision integers.",
    )
    parser.add_argument("first", nargs="?", help="first operand (prompted if omitted)")
    parser.add_argument("second", nargs="?", help="second operand (prompted if omitted)")
    parser.add_argument(
        "--arbitrary-length",
        action="store_true",
        help="parse digit strings of any length instead of the signed 32-bit range",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = _build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    first = args.first if args.first is not None else read_operand(FIRST_PROMPT, stdin, stdout)
    second = args.second if args.second is not None else read_operand(SECOND_PROMPT, stdin, stdout)
    config = DecimalParseConfig(allow_arbitrary_length=args.arbitrary_length)

    try:
        total = run_sum(first, second, config)
    except BigIntegerError as e:
        logger.debug("Failed to add %r and %r", first, second, exc_info=True)
        print(f"Error: {e}", file=stdout)
        return 1

    print(f"The sum is: {total}", file=stdout)
    return 0

"""CLI — демонстрационный клиент: сумма двух BigInteger."""

from .demo import main, read_operand, run_sum

__all__ = [
    "main",
    "read_operand",
    "run_sum",
]

"""
Тесты для демонстрационного CLI (python -m src.cli)

Проверяет:
1. Операнды из аргументов и из stdin
2. EOF трактуется как "0"
3. Ошибки разбора печатаются как "Error: ..." с exit code 1
4. Флаг --arbitrary-length
"""

import io

import pytest

from src.cli import main, read_operand, run_sum
from src.cli.demo import FIRST_PROMPT, SECOND_PROMPT
from src.core.domain import BigInteger
from src.core.math import DecimalParseConfig, UnsupportedError


@pytest.fixture
def stdout() -> io.StringIO:
    return io.StringIO()


class TestReadOperand:
    """Тесты read_operand"""

    def test_reads_line(self, stdout: io.StringIO) -> None:
        assert read_operand("Prompt:", io.StringIO("42\n"), stdout) == "42"
        assert stdout.getvalue() == "Prompt:\n"

    def test_eof_defaults_to_zero(self, stdout: io.StringIO) -> None:
        assert read_operand("Prompt:", io.StringIO(""), stdout) == "0"

    def test_crlf_stripped(self, stdout: io.StringIO) -> None:
        assert read_operand("Prompt:", io.StringIO("-7\r\n"), stdout) == "-7"


class TestRunSum:
    """Тесты run_sum"""

    def test_sum(self) -> None:
        assert run_sum("7", "-2") == BigInteger.from_int(5)

    def test_unsupported_without_config(self) -> None:
        with pytest.raises(UnsupportedError):
            run_sum("99999999999", "1")

    def test_with_config(self) -> None:
        cfg = DecimalParseConfig(allow_arbitrary_length=True)
        assert str(run_sum("18446744073709551615", "1", cfg)) == "18446744073709551616"


class TestMain:
    """Тесты main"""

    def test_arguments(self, stdout: io.StringIO) -> None:
        assert main(["5", "3"], stdout=stdout) == 0
        assert "The sum is: 8" in stdout.getvalue()

    def test_negative_arguments(self, stdout: io.StringIO) -> None:
        assert main(["--", "-5", "3"], stdout=stdout) == 0
        assert "The sum is: -2" in stdout.getvalue()

    def test_prompts_from_stdin(self, stdout: io.StringIO) -> None:
        code = main([], stdin=io.StringIO("1234\n4321\n"), stdout=stdout)
        output = stdout.getvalue()
        assert code == 0
        assert FIRST_PROMPT in output
        assert SECOND_PROMPT in output
        assert "The sum is: 5555" in output

    def test_one_argument_prompts_for_second(self, stdout: io.StringIO) -> None:
        code = main(["10"], stdin=io.StringIO("-15\n"), stdout=stdout)
        output = stdout.getvalue()
        assert code == 0
        assert FIRST_PROMPT not in output
        assert SECOND_PROMPT in output
        assert "The sum is: -5" in output

    def test_empty_stdin(self, stdout: io.StringIO) -> None:
        assert main([], stdin=io.StringIO(""), stdout=stdout) == 0
        assert "The sum is: 0" in stdout.getvalue()

    def test_invalid_operand(self, stdout: io.StringIO) -> None:
        assert main(["abc", "1"], stdout=stdout) == 1
        assert stdout.getvalue().startswith("Error: ")

    def test_blank_operand(self, stdout: io.StringIO) -> None:
        assert main([], stdin=io.StringIO("\n1\n"), stdout=stdout) == 1
        assert "Error: Input string cannot be null or whitespace." in stdout.getvalue()

    def test_large_operand_unsupported_by_default(self, stdout: io.StringIO) -> None:
        assert main(["99999999999", "1"], stdout=stdout) == 1
        assert "Error: " in stdout.getvalue()

    def test_arbitrary_length_flag(self, stdout: io.StringIO) -> None:
        assert main(["--arbitrary-length", "99999999999", "1"], stdout=stdout) == 0
        assert "The sum is: 100000000000" in stdout.getvalue()

    def test_verbose_flag(self, stdout: io.StringIO) -> None:
        assert main(["-v", "1", "1"], stdout=stdout) == 0
        assert "The sum is: 2" in stdout.getvalue()

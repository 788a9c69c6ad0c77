"""
JSON Schema Contract Validator

Валидация JSON представления BigInteger против контракта
schema/big_integer.json (draft 2020-12). Использует библиотеку jsonschema.

Контракт: {"sign": -1|0|1, "limbs": [...], "decimal": "..."}
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator

BIG_INTEGER_SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "big_integer.json"


def load_schema(path: Path) -> Dict[str, Any]:
    """
    Чтение JSON Schema файла с meta-validation.

    Raises:
        FileNotFoundError: Если файл не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    with open(path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {path.name}: {e}") from e

    return schema


@lru_cache(maxsize=1)
def big_integer_validator() -> Draft202012Validator:
    """Валидатор big_integer; схема читается один раз."""
    return Draft202012Validator(load_schema(BIG_INTEGER_SCHEMA_PATH))


def validate_big_integer(data: Dict[str, Any]) -> None:
    """
    Валидация big_integer данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    big_integer_validator().validate(data)


def iter_big_integer_errors(data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
    """Все нарушения схемы сразу, без exception."""
    return big_integer_validator().iter_errors(data)

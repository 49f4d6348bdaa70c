"""
Ratio Contract — JSON Schema для сериализованного Ratio

Схема schema/ratio.json (draft 2020-12) поставляется вместе с пакетом.
Валидатор строится один раз при импорте модуля; to_dict / from_dict
используют его повторно.
"""

import json
from pathlib import Path
from typing import Any, Final

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema файла.

    Args:
        schema_name: Имя схемы без расширения (например, 'ratio')
        schema_dir: Каталог со схемами

    Raises:
        FileNotFoundError: файл схемы не найден
        ValueError: файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}") from e
    return schema


RATIO_SCHEMA: Final[dict[str, Any]] = load_schema("ratio")
RATIO_VALIDATOR: Final[Draft202012Validator] = Draft202012Validator(RATIO_SCHEMA)


def validate_ratio(data: dict[str, Any]) -> None:
    """
    Валидация сериализованного Ratio.

    Raises:
        jsonschema.ValidationError: данные не соответствуют схеме
    """
    RATIO_VALIDATOR.validate(data)

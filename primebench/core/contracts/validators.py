"""
Контракт benchmark_report.json

harness проверяет каждый BenchmarkReport по JSON Schema (Draft 2020-12)
перед тем, как вернуть его вызывающему коду. Схема читается и проходит
meta-validation один раз, при импорте модуля.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

REPORT_SCHEMA_PATH = Path(__file__).parent / "schema" / "benchmark_report.json"


def load_report_schema(schema_path: Path = REPORT_SCHEMA_PATH) -> Dict[str, Any]:
    """
    Чтение схемы отчёта с meta-validation.

    Raises:
        FileNotFoundError: Если файла схемы нет
        ValueError: Если файл не является валидной Draft 2020-12 схемой
    """
    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e}") from e

    return schema


_REPORT_VALIDATOR = Draft202012Validator(load_report_schema())


def validate_benchmark_report(data: Dict[str, Any]) -> None:
    """
    Проверка сериализованного BenchmarkReport.

    Args:
        data: Результат BenchmarkReport.to_contract_dict()

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _REPORT_VALIDATOR.validate(data)

"""
JSON Schema Contract Validators

Валидация JSON-документов bignums по формальным JSON Schema контрактам
(библиотека jsonschema, Draft 2020-12).

Схемы (поставляются в пакете, contracts/schema/):
- chain_program.json — программа цепочки для run_program()
- chain_outcome.json — сериализованный ChainOutcome
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'chain_program')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class ChainProgramValidator(ContractValidator):
    """Валидатор для chain_program контракта."""

    def __init__(self):
        super().__init__("chain_program")


class ChainOutcomeValidator(ContractValidator):
    """Валидатор для chain_outcome контракта."""

    def __init__(self):
        super().__init__("chain_outcome")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_chain_program(data: Dict[str, Any]) -> None:
    """
    Валидация программы цепочки.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ChainProgramValidator().validate(data)


def validate_chain_outcome(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного ChainOutcome.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ChainOutcomeValidator().validate(data)

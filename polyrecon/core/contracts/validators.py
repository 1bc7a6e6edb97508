"""
JSON Schema Contract Validators

Модуль для валидации входного документа реконструкции согласно формальному
JSON Schema контракту. Использует библиотеку jsonschema для проверки
соответствия данных схеме, затем Pydantic для приведения к типизированной
записи SharesDocument.

Схемы:
- shares_input.json (вход реконструкции: keys + доли по абсциссам)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match
from pydantic import ValidationError as PydanticValidationError

from polyrecon.core.domain.shares import SharesDocument
from polyrecon.core.exceptions import PolyReconError


class InputContractError(PolyReconError, ValueError):
    """Вход не является валидным JSON или нарушает контракт shares_input."""

    pass


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем (package data).
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
            schema_name: Имя схемы без расширения (например, 'shares_input')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
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

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class SharesInputValidator(ContractValidator):
    """Валидатор для shares_input контракта."""

    def __init__(self):
        super().__init__("shares_input")


# =============================================================================
# PARSING
# =============================================================================


def parse_shares_document(raw_text: str) -> SharesDocument:
    """
    Полный разбор входа: JSON → контракт → типизированная запись.

    Args:
        raw_text: Весь текст, прочитанный со стандартного ввода

    Returns:
        SharesDocument, готовый для драйвера

    Raises:
        InputContractError: невалидный JSON, нарушение схемы или модели
    """
    try:
        data = json.loads(raw_text)
    except ValueError as e:
        # JSONDecodeError, а также слишком длинный целый литерал
        raise InputContractError(f"Input is not valid JSON: {e}") from e

    validator = SharesInputValidator()
    error = best_match(validator.iter_errors(data))
    if error is not None:
        location = "/".join(str(part) for part in error.absolute_path) or "<root>"
        raise InputContractError(
            f"Input violates shares_input contract at {location}: {error.message}"
        ) from error

    try:
        return SharesDocument.model_validate(data)
    except PydanticValidationError as e:
        raise InputContractError(f"Input failed model validation: {e}") from e

"""
JSON Schema Contract Validators

Модуль для валидации keyed-записей на входе нормализатора
согласно формальному JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схема complex_record.json: {re,im} / {abs,arg} / {r,phi} / {r,i}.
Сериализованные формы Complex.to_dict / to_polar — подмножество этого контракта.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema.exceptions import best_match
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'complex_record')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
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
    Экземпляры не хранят состояния между вызовами и безопасны для
    параллельного использования.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def first_error_message(self, data: Any) -> str | None:
        """
        Наиболее релевантная ошибка валидации (или None).

        Args:
            data: Данные для проверки

        Returns:
            Текст ошибки best_match либо None
        """
        error = best_match(self.validator.iter_errors(data))
        if error is None:
            return None
        return error.message


class ComplexRecordValidator(ContractValidator):
    """Валидатор keyed-записей на входе нормализатора."""

    def __init__(self):
        super().__init__("complex_record")

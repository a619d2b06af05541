"""
JSON Schema Contract Validators

Модуль для валидации plain-data, которые UI-оболочка передаёт ядру
(инвентарь фишек, настройки игры) и которые хранит PresetStore.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (chipcalc/core/contracts/schema/):
- chip_inventory.json
- game_settings.json
- preset_store.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from referencing import Registry, Resource

from chipcalc.core.domain.denomination import Denomination
from chipcalc.core.domain.game_settings import GameSettings


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются как package data рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._registry: Registry | None = None

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'chip_inventory')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def registry(self) -> Registry:
        """
        Registry всех схем директории, ключ: $id схемы.

        Нужен для $ref между файлами (preset_store.json ссылается на
        chip_inventory.json и game_settings.json).
        """
        if self._registry is None:
            resources = []
            for schema_path in sorted(self._schema_dir.glob("*.json")):
                schema = self.load_schema(schema_path.stem)
                resources.append((schema["$id"], Resource.from_contents(schema)))
            self._registry = Registry().with_resources(resources)
        return self._registry


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
        self.validator = Draft202012Validator(self.schema, registry=_SCHEMA_LOADER.registry())

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ChipInventoryValidator(ContractValidator):
    """Валидатор для chip_inventory контракта."""

    def __init__(self):
        super().__init__("chip_inventory")


class GameSettingsValidator(ContractValidator):
    """Валидатор для game_settings контракта."""

    def __init__(self):
        super().__init__("game_settings")


class PresetStoreValidator(ContractValidator):
    """Валидатор для документа PresetStore."""

    def __init__(self):
        super().__init__("preset_store")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_chip_inventory(data: Any) -> None:
    """
    Валидация инвентаря фишек.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ChipInventoryValidator().validate(data)


def validate_game_settings(data: Any) -> None:
    """
    Валидация настроек игры.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    GameSettingsValidator().validate(data)


def validate_preset_store(data: Any) -> None:
    """
    Валидация документа PresetStore.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PresetStoreValidator().validate(data)


def parse_chip_inventory(data: Any) -> List[Denomination]:
    """
    Инвентарь из plain-data UI-оболочки.

    Args:
        data: Список dict с ключами id, color, name, value, quantity

    Returns:
        Список Denomination в исходном порядке

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_chip_inventory(data)
    return [Denomination.model_validate(item) for item in data]


def parse_game_settings(data: Any) -> GameSettings:
    """
    Настройки игры из plain-data UI-оболочки.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_game_settings(data)
    return GameSettings.model_validate(data)

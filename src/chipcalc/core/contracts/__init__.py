"""
Contract Validation Module

Модуль для валидации JSON контрактов chipcalc.
"""

from .validators import (
    ChipInventoryValidator,
    ContractValidator,
    GameSettingsValidator,
    PresetStoreValidator,
    SchemaLoader,
    parse_chip_inventory,
    parse_game_settings,
    validate_chip_inventory,
    validate_game_settings,
    validate_preset_store,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ChipInventoryValidator",
    "GameSettingsValidator",
    "PresetStoreValidator",
    # Functions
    "validate_chip_inventory",
    "validate_game_settings",
    "validate_preset_store",
    "parse_chip_inventory",
    "parse_game_settings",
]

"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с Pydantic моделями
"""

import pytest
from jsonschema import ValidationError

from chipcalc.core.contracts import (
    ChipInventoryValidator,
    GameSettingsValidator,
    PresetStoreValidator,
    SchemaLoader,
    parse_chip_inventory,
    parse_game_settings,
    validate_chip_inventory,
    validate_game_settings,
    validate_preset_store,
)
from chipcalc.core.domain import Denomination, GameSettings, default_chips


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_inventory():
    """Инвентарь в формате UI-оболочки."""
    return [chip.model_dump() for chip in default_chips()]


@pytest.fixture
def valid_settings():
    return {"buy_in": 50, "small_blind": 0.5, "big_blind": 1, "num_players": 6}


@pytest.fixture
def valid_store(valid_inventory, valid_settings):
    return {
        "chips": valid_inventory,
        "game_settings": valid_settings,
        "presets": [
            {
                "id": "p1",
                "name": "Friday",
                "chips": valid_inventory,
                "game_settings": valid_settings,
                "updated_at": "2026-01-01T00:00:00+00:00",
            }
        ],
    }


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoader:
    @pytest.mark.parametrize("name", ["chip_inventory", "game_settings", "preset_store"])
    def test_schemas_load(self, name):
        schema = SchemaLoader().load_schema(name)

        assert schema["$schema"].endswith("2020-12/schema")

    def test_cached(self):
        loader = SchemaLoader()

        assert loader.load_schema("game_settings") is loader.load_schema("game_settings")

    def test_registry_indexes_by_id(self):
        registry = SchemaLoader().registry()

        assert registry.contents("chip_inventory.json")["title"] == "Chip inventory"
        assert registry.contents("game_settings.json")["title"] == "Game settings"

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# CHIP INVENTORY
# =============================================================================


class TestChipInventory:
    def test_valid(self, valid_inventory):
        validate_chip_inventory(valid_inventory)

    def test_empty_is_valid(self):
        assert ChipInventoryValidator().is_valid([])

    def test_missing_field(self, valid_inventory):
        del valid_inventory[0]["value"]

        with pytest.raises(ValidationError):
            validate_chip_inventory(valid_inventory)

    def test_negative_quantity(self, valid_inventory):
        valid_inventory[1]["quantity"] = -1

        assert not ChipInventoryValidator().is_valid(valid_inventory)

    def test_fractional_quantity(self, valid_inventory):
        valid_inventory[1]["quantity"] = 2.5

        errors = list(ChipInventoryValidator().iter_errors(valid_inventory))

        assert len(errors) == 1

    def test_parse(self, valid_inventory):
        chips = parse_chip_inventory(valid_inventory)

        assert all(isinstance(chip, Denomination) for chip in chips)
        assert chips == default_chips()


# =============================================================================
# GAME SETTINGS
# =============================================================================


class TestGameSettingsContract:
    def test_valid(self, valid_settings):
        validate_game_settings(valid_settings)

    def test_zero_buy_in(self, valid_settings):
        valid_settings["buy_in"] = 0

        with pytest.raises(ValidationError):
            validate_game_settings(valid_settings)

    def test_unknown_key(self, valid_settings):
        valid_settings["players"] = 6

        assert not GameSettingsValidator().is_valid(valid_settings)

    def test_parse(self, valid_settings):
        assert parse_game_settings(valid_settings) == GameSettings.default()


# =============================================================================
# PRESET STORE
# =============================================================================


class TestPresetStoreContract:
    def test_valid(self, valid_store):
        validate_preset_store(valid_store)

    def test_empty_document(self):
        assert PresetStoreValidator().is_valid(
            {"chips": None, "game_settings": None, "presets": []}
        )

    def test_preset_without_name(self, valid_store):
        del valid_store["presets"][0]["name"]

        with pytest.raises(ValidationError):
            validate_preset_store(valid_store)

    def test_preset_chips_use_inventory_contract(self, valid_store):
        valid_store["presets"][0]["chips"][0]["quantity"] = -1

        assert not PresetStoreValidator().is_valid(valid_store)

    def test_last_settings_use_settings_contract(self, valid_store):
        valid_store["game_settings"]["num_players"] = 0

        with pytest.raises(ValidationError):
            validate_preset_store(valid_store)

"""
PresetStore — JSON-хранилище инвентаря, настроек и именованных пресетов

Один JSON документ на диске:
    {"chips": [...] | null, "game_settings": {...} | null, "presets": [...]}

Документ проверяется схемой preset_store.json при чтении и перед каждой
записью. Отсутствующий файл читается как пустой документ; повреждённый или
не прошедший схему — логируется и читается как пустой. Ошибки записи
(OSError) пробрасываются вызывающему.
"""

import json
import logging
import os
import tempfile
import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from jsonschema import ValidationError

from chipcalc.config import Settings
from chipcalc.core.contracts.validators import validate_preset_store
from chipcalc.core.domain.denomination import Denomination
from chipcalc.core.domain.game_settings import GameSettings

logger = logging.getLogger(__name__)


# =============================================================================
# PRESET
# =============================================================================


@dataclass(frozen=True)
class Preset:
    """Именованная конфигурация: инвентарь + настройки игры."""

    id: str
    name: str
    chips: tuple[Denomination, ...]
    game_settings: GameSettings
    updated_at: str  # ISO-8601, UTC

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "chips": [chip.model_dump() for chip in self.chips],
            "game_settings": self.game_settings.model_dump(),
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Preset":
        return cls(
            id=data["id"],
            name=data["name"],
            chips=tuple(Denomination.model_validate(item) for item in data["chips"]),
            game_settings=GameSettings.model_validate(data["game_settings"]),
            updated_at=data["updated_at"],
        )


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_preset_id() -> str:
    return uuid.uuid4().hex


def _empty_document() -> dict[str, Any]:
    return {"chips": None, "game_settings": None, "presets": []}


# =============================================================================
# STORE
# =============================================================================


class PresetStore:
    """Файловое хранилище пресетов.

    Не потокобезопасно: рассчитано на одного владельца (UI-оболочку).
    """

    def __init__(
        self,
        path: Path | str,
        clock: Callable[[], str] = _utc_now_iso,
        id_factory: Callable[[], str] = _new_preset_id,
    ):
        """Инициализация хранилища.

        Args:
            path: путь к JSON документу (создаётся при первой записи)
            clock: источник метки updated_at
            id_factory: генератор id новых пресетов
        """
        self.path = Path(path)
        self._clock = clock
        self._id_factory = id_factory

    @classmethod
    def from_settings(cls, settings: Settings) -> "PresetStore":
        return cls(settings.store_path)

    # -------------------------------------------------------------------------
    # Инвентарь и настройки
    # -------------------------------------------------------------------------

    def save_chips(self, chips: Sequence[Denomination]) -> None:
        document = self._read()
        document["chips"] = [chip.model_dump() for chip in chips]
        self._write(document)

    def load_chips(self) -> list[Denomination] | None:
        """Последний сохранённый инвентарь или None."""
        chips = self._read()["chips"]
        if chips is None:
            return None
        return [Denomination.model_validate(item) for item in chips]

    def save_game_settings(self, settings: GameSettings) -> None:
        document = self._read()
        document["game_settings"] = settings.model_dump()
        self._write(document)

    def load_game_settings(self) -> GameSettings | None:
        """Последние сохранённые настройки или None."""
        settings = self._read()["game_settings"]
        if settings is None:
            return None
        return GameSettings.model_validate(settings)

    # -------------------------------------------------------------------------
    # Пресеты
    # -------------------------------------------------------------------------

    def get_presets(self) -> list[Preset]:
        return [Preset.from_dict(item) for item in self._read()["presets"]]

    def save_preset(
        self, name: str, chips: Sequence[Denomination], settings: GameSettings
    ) -> Preset:
        """
        Сохранение пресета (upsert по имени).

        Существующий пресет с тем же именем сохраняет свой id.

        Returns:
            Сохранённый Preset
        """
        document = self._read()
        presets = document["presets"]
        existing_index = next(
            (index for index, item in enumerate(presets) if item["name"] == name), None
        )

        preset = Preset(
            id=presets[existing_index]["id"] if existing_index is not None else self._id_factory(),
            name=name,
            chips=tuple(chips),
            game_settings=settings,
            updated_at=self._clock(),
        )

        if existing_index is not None:
            presets[existing_index] = preset.to_dict()
        else:
            presets.append(preset.to_dict())

        self._write(document)
        logger.debug("Saved preset %r (id=%s)", name, preset.id)
        return preset

    def delete_preset(self, preset_id: str) -> bool:
        """
        Удаление пресета по id.

        Returns:
            True если пресет был найден и удалён
        """
        document = self._read()
        remaining = [item for item in document["presets"] if item["id"] != preset_id]
        if len(remaining) == len(document["presets"]):
            return False

        document["presets"] = remaining
        self._write(document)
        return True

    def load_preset(self, preset_id: str) -> Preset | None:
        return next((preset for preset in self.get_presets() if preset.id == preset_id), None)

    # -------------------------------------------------------------------------
    # I/O
    # -------------------------------------------------------------------------

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return _empty_document()

        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
            validate_preset_store(document)
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            logger.warning("Ignoring unreadable preset store %s: %s", self.path, e)
            return _empty_document()

        return document

    def _write(self, document: dict[str, Any]) -> None:
        validate_preset_store(document)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # Атомарная замена: временный файл в той же директории + os.replace
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

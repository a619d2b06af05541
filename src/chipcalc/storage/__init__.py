"""Storage — JSON-хранилище инвентаря, настроек и пресетов."""

from .preset_store import Preset, PresetStore

__all__ = [
    "Preset",
    "PresetStore",
]

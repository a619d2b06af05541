from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CHIPCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # JSON document with last-used inventory, settings and presets
    store_path: Path = Path.home() / ".chipcalc" / "store.json"

    # Prefix for amounts embedded in warning texts
    currency_symbol: str = "$"


def get_settings() -> Settings:
    return Settings()

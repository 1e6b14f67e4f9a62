"""Runtime configuration, read from ``FLOWERSHOP_*`` environment variables
or a ``.env`` file in the working directory."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FLOWERSHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = _PROJECT_ROOT / "data"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3000
    # Fixes the replenishment dice, e.g. for demos.
    replenishment_seed: int | None = None

    @property
    def store_path(self) -> Path:
        return self.data_dir / "shop.json"

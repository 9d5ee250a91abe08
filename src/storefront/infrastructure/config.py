"""Runtime settings, read from ``STOREFRONT_*`` environment variables or ``.env``."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class StorefrontSettings(BaseSettings):
    data_dir: Path = Field(default=_DEFAULT_DATA_DIR)
    export_dir: Path = Field(default=Path("."))
    store_name: str = "Storefront"
    log_format: Literal["console", "json"] = "console"
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_", env_file=".env", extra="ignore"
    )

"""Runtime settings, read from ``STOREFRONT_*`` environment variables or ``.env``."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = Path("data")
    tax_rate: Decimal = Decimal("0.10")
    catalog_retries: int = 2
    cart_key: str = "cart"
    favorites_key: str = "favorites"


def get_settings() -> Settings:
    return Settings()

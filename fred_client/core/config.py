"""Load settings from env and YAML config files."""
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # FRED API
    fred_api_key: str = Field(default="", description="FRED API key from https://fred.stlouisfed.org/docs/api/api_key.html")
    fred_base_url: str = Field(
        default="https://api.stlouisfed.org/fred",
        description="Base URL; endpoint paths are appended after a slash",
    )

    # Transport
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    # Paths
    config_dir: Path = Field(default_factory=lambda: Path("config"))

    @field_validator("fred_base_url")
    @classmethod
    def _https_only(cls, v: str) -> str:
        if not v.startswith("https://"):
            raise ValueError("fred_base_url must use https")
        return v.rstrip("/")

    def get_smoke_config(self) -> dict[str, Any]:
        p = self.config_dir / "smoke.yaml"
        if not p.exists():
            p = self.config_dir / "smoke.example.yaml"
        return _load_yaml(p)


def get_settings() -> Settings:
    return Settings()

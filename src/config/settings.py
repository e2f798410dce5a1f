from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_BREEDS_OUTPUT = PROJECT_ROOT / "src" / "domain" / "catalog" / "breeds_generated.py"


class Settings(BaseSettings):
    log_level: str = "INFO"
    environment: str = "dev"
    # CORS
    cors_allow_origins: str = "*"
    # Phone numbers typed without a country code are assumed to be local (India)
    default_country_code: str = "91"
    # Breed catalog generator
    breeds_fci_csv_url: str = (
        "https://raw.githubusercontent.com/paiv/fci-breeds/main/fci-breeds.csv"
    )
    breeds_akc_csv_url: str = (
        "https://raw.githubusercontent.com/tmfilho/akcdata/master/data/akc-data-latest.csv"
    )
    breeds_user_agent: str = "bitb-breeds-generator/1.0"
    breeds_http_timeout_seconds: float = 30.0
    breeds_output_path: Path = DEFAULT_BREEDS_OUTPUT

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("default_country_code")
    @classmethod
    def digits_only_country_code(cls, value: str) -> str:
        digits = re.sub(r"\D", "", value or "")
        return digits or "91"

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        if isinstance(self.cors_allow_origins, str):
            return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]
        return self.cors_allow_origins


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

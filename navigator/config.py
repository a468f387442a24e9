"""Application configuration from environment."""
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

# Load .env from project root (parent of navigator/) so env vars are available everywhere
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)


class Settings(BaseSettings):
    app_name: str = "Thailand Navigator"
    app_env: str = "development"
    debug: bool = True

    # Approximate THB per unit of the profile's income currency. Every income
    # threshold in the rule engine is evaluated through this single rate.
    thb_per_foreign_unit: float = 36.0

    cors_allow_origins: str = "*"

    @field_validator("app_name", "app_env", "cors_allow_origins", mode="before")
    @classmethod
    def strip_str(cls, v: str) -> str:
        return (v or "").strip()

    @field_validator("thb_per_foreign_unit")
    @classmethod
    def positive_rate(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("thb_per_foreign_unit must be positive")
        return v

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]
        return origins or ["*"]

    class Config:
        env_file = str(_env_path)
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()

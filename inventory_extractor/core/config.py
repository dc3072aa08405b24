"""Application configuration powered by Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

AnalysisBackend = Literal["azure", "pdfplumber"]


class AppSettings(BaseSettings):
    """Strongly typed application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    environment: Literal["dev", "staging", "prod"] = Field(default="dev")
    project_name: str = Field(default="Construction Inventory Extractor")
    version: str = Field(default="0.1.0")

    azure_endpoint: str | None = Field(default=None, min_length=1)
    azure_key: str | None = Field(default=None, min_length=1)
    azure_model_id: str = Field(default="prebuilt-layout")

    analysis_backend: AnalysisBackend = Field(default="azure")

    cors_allowed_origins: list[str] = Field(default_factory=list)
    log_level: str = Field(default="INFO")

    @property
    def azure_configured(self) -> bool:
        return bool(self.azure_endpoint and self.azure_key)


@lru_cache
def get_settings() -> AppSettings:
    """Provide a cached singleton settings instance."""

    return AppSettings()

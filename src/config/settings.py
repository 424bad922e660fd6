"""Application configuration using Pydantic V2."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.storage import is_valid_storage_key

PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings and configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="CB Controle", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Storage
    data_dir: Path = Field(
        default_factory=lambda: PROJECT_ROOT / "data", description="Ledger storage directory"
    )
    storage_key: str = Field(default="cb_controle_data", description="Key of the ledger record")

    # UI
    sale_form_config: Path = Field(
        default_factory=lambda: PROJECT_ROOT / "config" / "sale_form.yaml",
        description="YAML file with the sale form options",
    )
    delete_confirm_seconds: float = Field(
        default=3.0, gt=0, description="How long a delete stays armed waiting for confirmation"
    )
    success_delay_seconds: float = Field(
        default=0.8, ge=0, description="Pause on the success message after registering a sale"
    )

    @field_validator("storage_key")
    @classmethod
    def validate_storage_key(cls, value: str) -> str:
        if not is_valid_storage_key(value):
            raise ValueError(
                f"storage_key {value!r} may only contain letters, digits, '_', '.' and '-'"
            )
        return value


# Singleton instance
settings = Settings()

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PetTypeName = Literal["cat", "dog", "rabbit", "fox", "hamster"]


class Settings(BaseSettings):
    storage_backend: str = Field(default="memory", validation_alias="FITPET_STORAGE_BACKEND")
    # In-process SQLite: state is lost on restart, same as the memory backend
    database_url: str = Field(default="sqlite://", validation_alias="FITPET_DATABASE_URL")
    log_level: str = Field(default="INFO", validation_alias="FITPET_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="FITPET_LOG_FILE")
    log_rotation: str = Field(default="10 MB", validation_alias="FITPET_LOG_ROTATION")
    log_retention: str = Field(default="7 days", validation_alias="FITPET_LOG_RETENTION")

    default_username: str = Field(default="user", validation_alias="FITPET_DEFAULT_USERNAME")
    default_pet_name: str = Field(default="Buddy", validation_alias="FITPET_DEFAULT_PET_NAME")
    default_pet_type: PetTypeName = Field(default="cat", validation_alias="FITPET_DEFAULT_PET_TYPE")
    seed_sample_data: bool = Field(default=True, validation_alias="FITPET_SEED_SAMPLE_DATA")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in {"memory", "sql"}:
            raise ValueError(f"FITPET_STORAGE_BACKEND must be 'memory' or 'sql', got {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()


settings = Settings()

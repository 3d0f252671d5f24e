from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.value_objects.storage_options import StorageOptions

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=_PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="ObjectStoreGateway", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path | None = Field(
        default=_PROJECT_ROOT / "logs",
        validation_alias="LOG_DIR",
    )

    # API
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=8000, validation_alias="API_PORT")

    # Object storage
    storage_root_client_path: str = Field(
        default="http://127.0.0.1:8000/objects",
        validation_alias="STORAGE_ROOT_CLIENT_PATH",
        description="Public root of object URLs: the CDN path or the storage account path.",
    )
    storage_backend_url: str = Field(
        default="file://" + str(_PROJECT_ROOT / "objects"),
        validation_alias="STORAGE_BACKEND_URL",
        description="fsspec URL of the backing store, e.g. s3://bucket-root or az://account.",
    )
    storage_backend_options: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias="STORAGE_BACKEND_OPTIONS",
        description="Credentials and fsspec storage options, as a JSON object.",
    )
    storage_content_type_option: str | None = Field(
        default="ContentType",
        validation_alias="STORAGE_CONTENT_TYPE_OPTION",
        description="Open-kwarg the backend filesystem reads the content type from.",
    )
    default_signed_url_duration_minutes: int = Field(
        default=60,
        gt=0,
        validation_alias="DEFAULT_SIGNED_URL_DURATION_MINUTES",
    )

    def storage_options(self) -> StorageOptions:
        """Build the immutable options injected into storage components."""
        return StorageOptions(
            root_client_path=self.storage_root_client_path,
            backend_url=self.storage_backend_url,
            backend_options=self.storage_backend_options,
            default_signed_url_duration_minutes=self.default_signed_url_duration_minutes,
        )


# Global settings instance
settings = Settings()

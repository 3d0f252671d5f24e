from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StorageOptions(BaseModel):
    """Immutable configuration shared by every storage component.

    Built once by the composition root and passed explicitly into
    constructors.
    """

    model_config = ConfigDict(frozen=True)

    root_client_path: str = Field(
        ...,
        description="Public root of object URLs, either the CDN path or the storage account path",
    )
    backend_url: str = Field(..., description="fsspec URL of the backing object store")
    backend_options: dict[str, Any] = Field(
        default_factory=dict,
        description="Credentials and storage options handed to the backend",
    )
    default_signed_url_duration_minutes: int = Field(
        default=60,
        gt=0,
        description="Lifetime of signed URLs created without an explicit duration",
    )

    @field_validator("root_client_path")
    @classmethod
    def validate_root_client_path(cls, v: str) -> str:
        """Strip the trailing slash so URLs can be joined with a single '/'."""
        v = v.strip().rstrip("/")
        if not v:
            msg = "Root client path cannot be blank or empty"
            raise ValueError(msg)
        return v

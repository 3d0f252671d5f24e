import datetime

from pydantic import BaseModel, ConfigDict, Field


class ObjectMetadata(BaseModel):
    """Read-only snapshot of a stored object, as returned by a container listing."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Object path inside its container")
    size: int | None = Field(None, ge=0, description="Size of the object in bytes, if known")
    download_path: str = Field(..., description="Public download URL built from the root client path")
    content_type: str | None = Field(None, description="Content type recorded for the object")
    created_at: datetime.datetime | None = Field(None, description="When the object was created")
    modified_at: datetime.datetime | None = Field(
        None,
        description="When the object was last modified",
    )
    last_accessed_at: datetime.datetime | None = Field(
        None,
        description="When the object was last read, where the backend tracks it",
    )

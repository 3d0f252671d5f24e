from pydantic import BaseModel, Field, model_validator


class StoredObjectResponse(BaseModel):
    url: str = Field(..., description="Canonical download URL of the stored object")
    container: str = Field(..., description="Container the object was stored in")


class DeleteObjectResponse(BaseModel):
    deleted: bool = Field(..., description="Whether an object was removed")
    url: str = Field(..., description="URL that was requested for deletion")


class CreateSignedUrlRequest(BaseModel):
    """Identify an object either by full URL or by container and object path."""

    url: str | None = Field(None, description="Full URL of the object")
    container: str | None = Field(None, description="Container holding the object")
    object_path: str | None = Field(None, description="Container-relative object path")
    duration_minutes: int | None = Field(
        None,
        gt=0,
        description="Token lifetime in minutes; the configured default when omitted",
    )

    @model_validator(mode="after")
    def validate_target(self) -> "CreateSignedUrlRequest":
        """Require exactly one way of naming the object."""
        by_url = self.url is not None
        by_path = self.container is not None or self.object_path is not None
        if by_url == by_path:
            msg = "Provide either 'url' or both 'container' and 'object_path'"
            raise ValueError(msg)
        if by_path and not (self.container and self.object_path):
            msg = "'container' and 'object_path' must both be provided"
            raise ValueError(msg)
        return self


class SignedUrlResponse(BaseModel):
    url: str = Field(..., description="URL embedding a read-only access token")
    expires_in_minutes: int = Field(..., description="Lifetime of the token in minutes")

from pydantic import BaseModel, ConfigDict, Field


class ObjectLocation(BaseModel):
    """A full object URL decomposed into root, container and object path.

    Only produced by ``ObjectPathResolver.decompose_url``.
    """

    model_config = ConfigDict(frozen=True)

    root_url: str = Field(..., description="Configured root, typically the storage or CDN URL")
    container: str = Field(..., description="Container holding the object")
    object_path: str = Field(..., description="Container-relative object path, may contain '/'")

    @property
    def url(self) -> str:
        """Rebuild the full URL this location was decomposed from."""
        return f"{self.root_url}/{self.container}/{self.object_path}"

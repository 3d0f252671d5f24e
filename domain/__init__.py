"""Domain layer exports."""

from domain.exceptions import (
    DomainError,
    InfrastructureError,
    InvalidArgumentError,
    SigningNotSupportedError,
    UploadFailedError,
)
from domain.value_objects import (
    ObjectLocation,
    ObjectMetadata,
    SignedUrlPermission,
    StorageOptions,
)

__all__ = [
    "DomainError",
    "InfrastructureError",
    "InvalidArgumentError",
    "ObjectLocation",
    "ObjectMetadata",
    "SignedUrlPermission",
    "SigningNotSupportedError",
    "StorageOptions",
    "UploadFailedError",
]

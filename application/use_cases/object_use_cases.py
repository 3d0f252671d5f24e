from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.object_dtos import (
    CreateSignedUrlRequest,
    DeleteObjectResponse,
    SignedUrlResponse,
    StoredObjectResponse,
)
from domain.exceptions import (
    InfrastructureError,
    InvalidArgumentError,
    SigningNotSupportedError,
    UploadFailedError,
)

if TYPE_CHECKING:
    from application.ports.posted_file import PostedFile
    from application.services.object_store_gateway import ObjectStoreGateway
    from application.services.signed_url_issuer import SignedUrlIssuer
    from domain.value_objects.object_metadata import ObjectMetadata
    from domain.value_objects.storage_options import StorageOptions

logger = structlog.get_logger()


class UploadObjectUseCase:
    """Upload a posted file under a slug or an explicit name."""

    def __init__(self, gateway: ObjectStoreGateway) -> None:
        self.gateway = gateway

    async def execute(
        self,
        file: PostedFile | None,
        container: str,
        *,
        slug: str | None = None,
        name: str | None = None,
    ) -> Result[StoredObjectResponse, AppError]:
        """Store the file and return its canonical URL.

        Exactly one of ``slug`` and ``name`` must be given.
        """
        if (slug is None) == (name is None):
            return Failure(AppError("validation", "Provide either a slug or a name"))

        try:
            if slug is not None:
                url = await self.gateway.upload_with_slug(file, container, slug)
            else:
                url = await self.gateway.upload_with_name(file, container, name)
        except InvalidArgumentError as e:
            return Failure(AppError("validation", f"Validation error: {e!s}"))
        except UploadFailedError as e:
            return Failure(AppError("upload_failed", str(e)))

        return Success(StoredObjectResponse(url=url, container=container.lower()))


class DeleteObjectUseCase:
    """Delete the object behind a full download URL."""

    def __init__(self, gateway: ObjectStoreGateway) -> None:
        self.gateway = gateway

    async def execute(self, container: str, url: str) -> Result[DeleteObjectResponse, AppError]:
        try:
            deleted = await self.gateway.delete_object(container, url)
        except InvalidArgumentError as e:
            return Failure(AppError("validation", f"Validation error: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Failed to delete object: {e!s}"))

        if not deleted:
            return Failure(AppError("not_found", f"No object found in '{container}' for {url}"))
        return Success(DeleteObjectResponse(deleted=True, url=url))


class ListObjectsUseCase:
    """List every object in a container."""

    def __init__(self, gateway: ObjectStoreGateway) -> None:
        self.gateway = gateway

    async def execute(self, container: str) -> Result[list[ObjectMetadata], AppError]:
        try:
            return Success(await self.gateway.list_objects(container))
        except InvalidArgumentError as e:
            return Failure(AppError("validation", f"Validation error: {e!s}"))
        except InfrastructureError as e:
            return Failure(AppError("infrastructure", f"Failed to list objects: {e!s}"))


class CreateSignedUrlUseCase:
    """Create a read-only signed URL for an object."""

    def __init__(self, issuer: SignedUrlIssuer, options: StorageOptions) -> None:
        self.issuer = issuer
        self.options = options

    async def execute(self, request: CreateSignedUrlRequest) -> Result[SignedUrlResponse, AppError]:
        duration = request.duration_minutes or self.options.default_signed_url_duration_minutes
        try:
            if request.url is not None:
                signed_url = await self.issuer.sign_full_url(request.url, duration)
            else:
                signed_url = await self.issuer.sign(
                    request.container,
                    request.object_path,
                    duration,
                )
        except InvalidArgumentError as e:
            return Failure(AppError("validation", f"Validation error: {e!s}"))
        except SigningNotSupportedError as e:
            return Failure(AppError("forbidden", f"Signed URLs are not available: {e!s}"))

        return Success(SignedUrlResponse(url=signed_url, expires_in_minutes=duration))

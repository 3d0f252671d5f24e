from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from lagom import Container

from application.dtos.object_dtos import (
    CreateSignedUrlRequest,
    DeleteObjectResponse,
    SignedUrlResponse,
    StoredObjectResponse,
)
from application.use_cases.object_use_cases import (
    CreateSignedUrlUseCase,
    DeleteObjectUseCase,
    ListObjectsUseCase,
    UploadObjectUseCase,
)
from domain.value_objects.object_metadata import ObjectMetadata
from interfaces.api.middleware import handle_use_case_errors
from interfaces.api.posted_file import UploadFilePostedFile
from interfaces.dependencies import get_container

logger = structlog.get_logger()

router = APIRouter(prefix="/objects", tags=["objects"])
signed_url_router = APIRouter(prefix="/signed-urls", tags=["signed-urls"])


@router.post("/{container_name}", status_code=status.HTTP_201_CREATED)
@handle_use_case_errors
async def upload_object(
    container_name: str,
    container: Annotated[Container, Depends(get_container)],
    file: Annotated[UploadFile | None, File()] = None,
    slug: Annotated[str | None, Form()] = None,
    name: Annotated[str | None, Form()] = None,
) -> StoredObjectResponse:
    """Upload a file under a slug-derived name or an explicit name.

    Returns:
        201 Created: Object stored, body carries its canonical URL
        400 Bad Request: No file, or not exactly one of slug/name
        502 Bad Gateway: The storage backend rejected the upload

    """
    use_case = container[UploadObjectUseCase]
    posted = UploadFilePostedFile(file) if file is not None else None
    return await use_case.execute(posted, container_name, slug=slug, name=name)


@router.get("/{container_name}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def list_objects(
    container_name: str,
    container: Annotated[Container, Depends(get_container)],
) -> list[ObjectMetadata]:
    """List every object in a container; unbounded for large containers."""
    use_case = container[ListObjectsUseCase]
    return await use_case.execute(container_name)


@router.delete("/{container_name}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def delete_object(
    container_name: str,
    container: Annotated[Container, Depends(get_container)],
    url: Annotated[str, Query(description="Full download URL of the object")],
) -> DeleteObjectResponse:
    """Delete the object a full URL points to; 404 when nothing was deleted."""
    use_case = container[DeleteObjectUseCase]
    return await use_case.execute(container_name, url)


@signed_url_router.post("", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def create_signed_url(
    request: CreateSignedUrlRequest,
    container: Annotated[Container, Depends(get_container)],
) -> SignedUrlResponse:
    """Create a read-only signed URL for an object.

    Returns:
        200 OK: Signed URL and its lifetime
        400 Bad Request: URL outside the configured root
        403 Forbidden: Credentials cannot create signed URLs

    """
    use_case = container[CreateSignedUrlUseCase]
    return await use_case.execute(request)

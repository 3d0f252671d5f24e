from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from domain.value_objects.signed_url_permission import SignedUrlPermission


@dataclass(frozen=True)
class StoredObjectInfo:
    name: str
    size: int | None = None
    content_type: str | None = None
    created_at: datetime | None = None
    modified_at: datetime | None = None
    last_accessed_at: datetime | None = None


class ObjectBackend(Protocol):
    """Port for the object store that actually holds the bytes.

    Container names are passed already normalised by the caller. Methods
    suspend on the backend's network I/O.
    """

    async def put_object(
        self,
        container: str,
        name: str,
        data: bytes | BinaryIO,
        content_type: str | None = None,
    ) -> str: ...
    async def delete_object(self, container: str, name: str) -> bool: ...
    async def list_objects(self, container: str) -> list[StoredObjectInfo]: ...
    async def sign_url(
        self,
        container: str,
        name: str,
        expires_on: datetime,
        permission: SignedUrlPermission,
    ) -> str:
        """Return a URL granting ``permission`` on the object until ``expires_on``.

        Raises:
            SigningNotSupportedError: If the backend or its credentials cannot
                produce signed URLs for this permission

        """
        ...

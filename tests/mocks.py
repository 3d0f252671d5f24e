"""Test doubles for the application ports."""

from __future__ import annotations

from io import BytesIO
from typing import TYPE_CHECKING, BinaryIO

from application.ports.object_backend import ObjectBackend, StoredObjectInfo
from domain.exceptions import SigningNotSupportedError

if TYPE_CHECKING:
    from datetime import datetime

    from domain.value_objects.signed_url_permission import SignedUrlPermission


class MockObjectBackend(ObjectBackend):
    """In-memory backend recording every call it receives."""

    def __init__(self, *, can_sign: bool = True, signed_url: str | None = None) -> None:
        self.objects: dict[tuple[str, str], bytes] = {}
        self.content_types: dict[tuple[str, str], str | None] = {}
        self.calls: list[tuple] = []
        self.can_sign = can_sign
        self.signed_url = signed_url
        self.sign_requests: list[tuple[str, str, datetime, SignedUrlPermission]] = []

    async def put_object(
        self,
        container: str,
        name: str,
        data: bytes | BinaryIO,
        content_type: str | None = None,
    ) -> str:
        self.calls.append(("put", container, name))
        payload = data if isinstance(data, bytes) else data.read()
        self.objects[(container, name)] = payload
        self.content_types[(container, name)] = content_type
        return f"mock://{container}/{name}"

    async def delete_object(self, container: str, name: str) -> bool:
        self.calls.append(("delete", container, name))
        return self.objects.pop((container, name), None) is not None

    async def list_objects(self, container: str) -> list[StoredObjectInfo]:
        self.calls.append(("list", container))
        return [
            StoredObjectInfo(
                name=name,
                size=len(payload),
                content_type=self.content_types.get((owner, name)),
            )
            for (owner, name), payload in sorted(self.objects.items())
            if owner == container
        ]

    async def sign_url(
        self,
        container: str,
        name: str,
        expires_on: datetime,
        permission: SignedUrlPermission,
    ) -> str:
        self.sign_requests.append((container, name, expires_on, permission))
        if not self.can_sign:
            msg = "Credentials cannot sign URLs"
            raise SigningNotSupportedError(msg)
        if self.signed_url is not None:
            return self.signed_url
        return f"https://signed.example/{container}/{name}?se={expires_on.isoformat()}&sp=r"


class FailingObjectBackend(MockObjectBackend):
    """Backend whose writes always fail."""

    async def put_object(
        self,
        container: str,
        name: str,
        data: bytes | BinaryIO,
        content_type: str | None = None,
    ) -> str:
        msg = "connection reset by storage service"
        raise OSError(msg)


class MockPostedFile:
    def __init__(self, file_name: str, content: bytes = b"content") -> None:
        self.file_name = file_name
        self._content = content

    def open_read_stream(self) -> BinaryIO:
        return BytesIO(self._content)

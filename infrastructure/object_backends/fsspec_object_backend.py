from __future__ import annotations

import asyncio
import posixpath
from datetime import UTC, datetime
from io import BytesIO
from typing import Any, BinaryIO
from urllib.parse import parse_qs, urlsplit

import fsspec
import structlog

from application.ports.object_backend import ObjectBackend, StoredObjectInfo
from domain.exceptions import (
    InfrastructureError,
    InvalidArgumentError,
    SigningNotSupportedError,
)
from domain.value_objects.signed_url_permission import SignedUrlPermission

logger = structlog.get_logger()

_CHUNK_SIZE = 1024 * 1024

# fsspec implementations report metadata under different keys
_CREATED_KEYS = ("created", "creation_time", "timeCreated", "CreationDate")
_MODIFIED_KEYS = ("LastModified", "last_modified", "updated", "mtime")
_ACCESSED_KEYS = ("last_accessed_on", "atime")
_CONTENT_TYPE_KEYS = ("ContentType", "content_type", "contentType", "mimetype")

# Query parameters carrying the signature in S3, GCS and Azure SAS URLs
_SIGNATURE_PARAMS = frozenset({"x-amz-signature", "signature", "x-goog-signature", "sig"})


def _first(info: dict[str, Any], keys: tuple[str, ...]) -> Any:  # noqa: ANN401
    for key in keys:
        if info.get(key) is not None:
            return info[key]
    return None


def _as_datetime(value: object) -> datetime | None:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    if isinstance(value, int | float):
        return datetime.fromtimestamp(value, tz=UTC)
    if isinstance(value, str):
        try:
            return _as_datetime(datetime.fromisoformat(value))
        except ValueError:
            return None
    return None


def _carries_signature(url: str | None) -> bool:
    if not url:
        return False
    query = parse_qs(urlsplit(url).query)
    return any(key.lower() in _SIGNATURE_PARAMS for key in query)


def _content_type(info: dict[str, Any]) -> str | None:
    content_type = _first(info, _CONTENT_TYPE_KEYS)
    if content_type is None and isinstance(info.get("content_settings"), dict):
        content_type = info["content_settings"].get("content_type")
    return content_type


class FsspecObjectBackend(ObjectBackend):
    """Adapter implementing the ObjectBackend port on any fsspec filesystem.

    Containers map to top-level directories (or key prefixes) under
    ``base_url``. Blocking filesystem calls run in a worker thread.
    """

    def __init__(
        self,
        base_url: str,
        *,
        storage_options: dict | None = None,
        content_type_option: str | None = "ContentType",
    ) -> None:
        """Initialize the filesystem for ``base_url``.

        Args:
            base_url: fsspec URL of the store root, e.g. ``s3://bucket/prefix``
            storage_options: Credentials and options for the filesystem
            content_type_option: Name of the open-kwarg the filesystem reads
                the content type from; None to never send it

        """
        self.base_url = base_url.rstrip("/")
        self.storage_options = storage_options or {}
        self.content_type_option = content_type_option
        self.fs, self.root = fsspec.core.url_to_fs(self.base_url, **self.storage_options)

        logger.info(
            "initializing_fsspec_object_backend",
            base_url=self.base_url,
            protocol=self.fs.protocol,
            has_storage_options=bool(self.storage_options),
        )

    def _container_path(self, container: str) -> str:
        if not container or container in {".", ".."} or "/" in container or "\\" in container:
            msg = f"Invalid container name: {container!r}"
            raise InvalidArgumentError(msg)
        return f"{self.root.rstrip('/')}/{container}"

    def _path(self, container: str, name: str) -> str:
        """Join ``name`` under the container, refusing paths that leave it."""
        base = self._container_path(container)
        path = posixpath.normpath(f"{base}/{name.lstrip('/')}")
        if not path.startswith(f"{base}/"):
            msg = f"Object name escapes container '{container}': {name!r}"
            raise InvalidArgumentError(msg)
        return path

    async def put_object(
        self,
        container: str,
        name: str,
        data: bytes | BinaryIO,
        content_type: str | None = None,
    ) -> str:
        return await asyncio.to_thread(self._put_object, container, name, data, content_type)

    def _put_object(
        self,
        container: str,
        name: str,
        data: bytes | BinaryIO,
        content_type: str | None,
    ) -> str:
        path = self._path(container, name)
        stream = BytesIO(data) if isinstance(data, bytes | bytearray) else data

        open_kwargs: dict[str, Any] = {}
        if content_type and self.content_type_option:
            open_kwargs[self.content_type_option] = content_type

        self.fs.makedirs(posixpath.dirname(path), exist_ok=True)
        with self.fs.open(path, "wb", **open_kwargs) as out:
            while True:
                chunk = stream.read(_CHUNK_SIZE)
                if not chunk:
                    break
                out.write(chunk)

        return self.fs.unstrip_protocol(path)

    async def delete_object(self, container: str, name: str) -> bool:
        return await asyncio.to_thread(self._delete_object, container, name)

    def _delete_object(self, container: str, name: str) -> bool:
        path = self._path(container, name)
        try:
            if not self.fs.isfile(path):
                return False
            self.fs.rm(path)
        except OSError as e:
            msg = f"Failed to delete {path}: {e!s}"
            raise InfrastructureError(msg) from e
        return True

    async def list_objects(self, container: str) -> list[StoredObjectInfo]:
        return await asyncio.to_thread(self._list_objects, container)

    def _list_objects(self, container: str) -> list[StoredObjectInfo]:
        prefix = self._container_path(container)
        try:
            found = self.fs.find(prefix, detail=True)
        except OSError as e:
            msg = f"Failed to list {prefix}: {e!s}"
            raise InfrastructureError(msg) from e

        objects = []
        for path, info in found.items():
            if info.get("type", "file") != "file":
                continue
            name = path.removeprefix(prefix).lstrip("/")
            size = info.get("size")
            objects.append(
                StoredObjectInfo(
                    name=name,
                    size=int(size) if size is not None else None,
                    content_type=_content_type(info),
                    created_at=_as_datetime(_first(info, _CREATED_KEYS)),
                    modified_at=_as_datetime(_first(info, _MODIFIED_KEYS)),
                    last_accessed_at=_as_datetime(_first(info, _ACCESSED_KEYS)),
                ),
            )
        return sorted(objects, key=lambda o: o.name)

    async def sign_url(
        self,
        container: str,
        name: str,
        expires_on: datetime,
        permission: SignedUrlPermission,
    ) -> str:
        if permission is not SignedUrlPermission.READ:
            msg = f"Only read access can be signed by this backend, not {permission.value}"
            raise SigningNotSupportedError(msg)
        return await asyncio.to_thread(self._sign_url, container, name, expires_on)

    def _sign_url(self, container: str, name: str, expires_on: datetime) -> str:
        path = self._path(container, name)
        if self.storage_options.get("anon"):
            msg = f"Anonymous credentials for '{self.base_url}' cannot create signed URLs"
            raise SigningNotSupportedError(msg)

        expiration = max(1, int((expires_on - datetime.now(UTC)).total_seconds()))
        try:
            signed_url = self.fs.sign(path, expiration=expiration)
        except NotImplementedError as e:
            msg = f"Storage backend '{self.base_url}' cannot create signed URLs"
            raise SigningNotSupportedError(msg) from e

        if not _carries_signature(signed_url):
            logger.error("unsigned_url_from_backend", base_url=self.base_url, path=path)
            msg = f"Storage backend '{self.base_url}' returned a URL without a signature"
            raise SigningNotSupportedError(msg)
        return signed_url

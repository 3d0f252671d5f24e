from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import structlog

from domain.exceptions import InvalidArgumentError, UploadFailedError
from domain.services.content_type_resolver import extension_of
from domain.value_objects.object_metadata import ObjectMetadata

if TYPE_CHECKING:
    from application.ports.content_type_mapper import ContentTypeMapper
    from application.ports.object_backend import ObjectBackend, StoredObjectInfo
    from application.ports.posted_file import PostedFile
    from application.ports.slug_generator import SlugGenerator
    from domain.services.object_path_resolver import ObjectPathResolver
    from domain.value_objects.storage_options import StorageOptions

logger = structlog.get_logger()


class ObjectStoreGateway:
    """Store, delete and list objects against the configured backend.

    Container names are lower-cased for storage addressing and in every URL
    this gateway returns.

    Concurrent stores to the same path are not serialised: the last write
    wins and a delete from one call may interleave with another's upload.
    """

    def __init__(  # noqa: PLR0913
        self,
        backend: ObjectBackend,
        content_type_mapper: ContentTypeMapper,
        slug_generator: SlugGenerator,
        path_resolver: ObjectPathResolver,
        options: StorageOptions,
    ) -> None:
        self.backend = backend
        self.content_type_mapper = content_type_mapper
        self.slug_generator = slug_generator
        self.path_resolver = path_resolver
        self.options = options

    def _download_path(self, container: str, name: str) -> str:
        return f"{self.options.root_client_path}/{container}/{name}"

    async def store_object(
        self,
        container: str,
        content: bytes | BinaryIO,
        desired_name: str,
    ) -> str:
        """Store ``content`` as ``desired_name``, replacing any existing object.

        The content type is inferred from the name's extension and only sent
        when known.

        Args:
            container: Target container
            content: Raw bytes or a readable binary stream
            desired_name: Object name inside the container, including any path or extension

        Returns:
            The canonical download URL of the stored object

        """
        container = container.lower()
        url = self._download_path(container, desired_name)
        logger.info("creating_object", url=url, container=container, name=desired_name)

        await self.backend.delete_object(container, desired_name)

        _, content_type = self.content_type_mapper.try_get_content_type(desired_name)
        await self.backend.put_object(container, desired_name, content, content_type)

        return url

    async def delete_object(self, container: str, full_url: str) -> bool:
        """Delete the object a full URL points to.

        Returns:
            True if an object was deleted, False if none existed or the
            container could not be located in the URL

        """
        object_name = self.path_resolver.get_object_name(container, full_url)
        if object_name is None:
            logger.info("object_name_not_resolved", container=container, url=full_url)
            return False

        logger.info("deleting_object", container=container, name=object_name)
        return await self.backend.delete_object(container.lower(), object_name)

    async def list_objects(self, container: str) -> list[ObjectMetadata]:
        """List every object in ``container``.

        The whole container is enumerated in one call, so this can be slow for
        very large containers; bounding it is up to the caller.
        """
        container = container.lower()
        stored = await self.backend.list_objects(container)
        return [self._to_metadata(container, info) for info in stored]

    def _to_metadata(self, container: str, info: StoredObjectInfo) -> ObjectMetadata:
        return ObjectMetadata(
            name=info.name,
            size=info.size,
            download_path=self._download_path(container, info.name),
            content_type=info.content_type,
            created_at=info.created_at,
            modified_at=info.modified_at,
            last_accessed_at=info.last_accessed_at,
        )

    async def upload_with_slug(
        self,
        file: PostedFile | None,
        container: str,
        slug_seed: str,
    ) -> str:
        """Upload a posted file under a slug of ``slug_seed`` plus the file's extension.

        Uploading ``Report.PDF`` with the seed ``"My Test Slug"`` stores
        ``my-test-slug.pdf``.

        Raises:
            InvalidArgumentError: If no file was posted, or the target name
                leaves the container
            UploadFailedError: If storing the file fails

        """
        if file is None:
            msg = "No file was provided for upload"
            raise InvalidArgumentError(msg)

        slug = self.slug_generator.generate_slug(slug_seed)
        target_name = f"{slug}{extension_of(file.file_name)}"
        return await self._upload(file, container, target_name, slug=slug)

    async def upload_with_name(
        self,
        file: PostedFile | None,
        container: str,
        desired_name: str,
    ) -> str:
        """Upload a posted file under a caller-supplied name.

        Raises:
            InvalidArgumentError: If no file was posted, or the target name
                leaves the container
            UploadFailedError: If storing the file fails

        """
        if file is None:
            msg = "No file was provided for upload"
            raise InvalidArgumentError(msg)

        return await self._upload(file, container, desired_name)

    async def _upload(
        self,
        file: PostedFile,
        container: str,
        target_name: str,
        *,
        slug: str | None = None,
    ) -> str:
        try:
            return await self.store_object(container, file.open_read_stream(), target_name)
        except InvalidArgumentError:
            raise
        except Exception as e:
            logger.exception(
                "object_upload_failed",
                container=container,
                name=target_name,
                slug=slug,
                error=str(e),
            )
            msg = f"Error uploading to storage: {e!s}"
            raise UploadFailedError(msg) from e

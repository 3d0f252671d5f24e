from __future__ import annotations

from lagom import Container

from application.ports.content_type_mapper import ContentTypeMapper
from application.ports.object_backend import ObjectBackend
from application.ports.slug_generator import SlugGenerator
from application.services.object_store_gateway import ObjectStoreGateway
from application.services.signed_url_issuer import SignedUrlIssuer
from application.use_cases.object_use_cases import (
    CreateSignedUrlUseCase,
    DeleteObjectUseCase,
    ListObjectsUseCase,
    UploadObjectUseCase,
)
from domain.services.content_type_resolver import ContentTypeResolver
from domain.services.object_path_resolver import ObjectPathResolver
from domain.value_objects.storage_options import StorageOptions
from infrastructure.config import Settings, settings
from infrastructure.object_backends.fsspec_object_backend import FsspecObjectBackend
from infrastructure.slugs.unicode_slug_generator import UnicodeSlugGenerator


def create_container(config: Settings = settings) -> Container:
    container = Container()

    # Configuration is read once here and injected everywhere else
    storage_options = config.storage_options()
    container[StorageOptions] = storage_options

    # Object storage (fsspec)
    object_backend_instance = FsspecObjectBackend(
        base_url=storage_options.backend_url,
        storage_options=storage_options.backend_options,
        content_type_option=config.storage_content_type_option,
    )
    container[ObjectBackend] = object_backend_instance

    # Pure lookups and helpers
    container[ContentTypeMapper] = ContentTypeResolver()
    container[SlugGenerator] = UnicodeSlugGenerator()
    container[ObjectPathResolver] = lambda c: ObjectPathResolver(options=c[StorageOptions])

    # Core services
    container[SignedUrlIssuer] = lambda c: SignedUrlIssuer(
        backend=c[ObjectBackend],
        path_resolver=c[ObjectPathResolver],
        options=c[StorageOptions],
    )
    container[ObjectStoreGateway] = lambda c: ObjectStoreGateway(
        backend=c[ObjectBackend],
        content_type_mapper=c[ContentTypeMapper],
        slug_generator=c[SlugGenerator],
        path_resolver=c[ObjectPathResolver],
        options=c[StorageOptions],
    )

    # Register Use Cases
    container[UploadObjectUseCase] = lambda c: UploadObjectUseCase(gateway=c[ObjectStoreGateway])
    container[DeleteObjectUseCase] = lambda c: DeleteObjectUseCase(gateway=c[ObjectStoreGateway])
    container[ListObjectsUseCase] = lambda c: ListObjectsUseCase(gateway=c[ObjectStoreGateway])
    container[CreateSignedUrlUseCase] = lambda c: CreateSignedUrlUseCase(
        issuer=c[SignedUrlIssuer],
        options=c[StorageOptions],
    )

    return container

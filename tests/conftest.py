"""Shared fixtures for object store tests."""

from __future__ import annotations

from uuid import uuid4

import pytest

from domain.services.content_type_resolver import ContentTypeResolver
from domain.services.object_path_resolver import ObjectPathResolver
from domain.value_objects.storage_options import StorageOptions
from infrastructure.object_backends.fsspec_object_backend import FsspecObjectBackend
from infrastructure.slugs.unicode_slug_generator import UnicodeSlugGenerator

ROOT = "https://teststorage.blob.core.windows.net"


@pytest.fixture
def memory_url() -> str:
    """A fresh location on the process-wide fsspec memory filesystem."""
    return f"memory://object-store-tests/{uuid4().hex}"


@pytest.fixture
def storage_options(memory_url: str) -> StorageOptions:
    return StorageOptions(root_client_path=ROOT, backend_url=memory_url)


@pytest.fixture
def path_resolver(storage_options: StorageOptions) -> ObjectPathResolver:
    return ObjectPathResolver(storage_options)


@pytest.fixture
def content_type_resolver() -> ContentTypeResolver:
    return ContentTypeResolver()


@pytest.fixture
def slug_generator() -> UnicodeSlugGenerator:
    return UnicodeSlugGenerator()


@pytest.fixture
def memory_backend(memory_url: str) -> FsspecObjectBackend:
    return FsspecObjectBackend(memory_url)

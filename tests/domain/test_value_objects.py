"""Tests for storage value objects."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from domain.value_objects.object_location import ObjectLocation
from domain.value_objects.object_metadata import ObjectMetadata
from domain.value_objects.signed_url_permission import SignedUrlPermission
from domain.value_objects.storage_options import StorageOptions


class TestStorageOptions:
    def test_trailing_slash_is_stripped(self) -> None:
        options = StorageOptions(root_client_path=" https://cdn.example.com/ ", backend_url="memory://x")
        assert options.root_client_path == "https://cdn.example.com"

    def test_defaults(self) -> None:
        options = StorageOptions(root_client_path="https://cdn.example.com", backend_url="memory://x")
        assert options.default_signed_url_duration_minutes == 60
        assert options.backend_options == {}

    def test_blank_root_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StorageOptions(root_client_path="  / ", backend_url="memory://x")

    def test_non_positive_duration_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StorageOptions(
                root_client_path="https://cdn.example.com",
                backend_url="memory://x",
                default_signed_url_duration_minutes=0,
            )

    def test_options_are_frozen(self) -> None:
        options = StorageOptions(root_client_path="https://cdn.example.com", backend_url="memory://x")
        with pytest.raises(ValidationError):
            options.root_client_path = "https://other.example.com"  # type: ignore[misc]


class TestObjectLocation:
    def test_url_rebuilds_full_path(self) -> None:
        location = ObjectLocation(
            root_url="https://h",
            container="blog",
            object_path="specialpath/testHeader.jpg",
        )
        assert location.url == "https://h/blog/specialpath/testHeader.jpg"


class TestObjectMetadata:
    def test_negative_size_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ObjectMetadata(name="a.png", size=-1, download_path="https://h/c/a.png")

    def test_optional_fields_default_to_none(self) -> None:
        metadata = ObjectMetadata(name="a.png", download_path="https://h/c/a.png")
        assert metadata.size is None
        assert metadata.content_type is None
        assert metadata.created_at is None


def test_signed_url_permission_values() -> None:
    assert SignedUrlPermission.READ.value == "READ"
    assert {p.value for p in SignedUrlPermission} == {"READ", "WRITE", "DELETE"}

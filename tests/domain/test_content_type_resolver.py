"""Tests for content type resolution."""

from __future__ import annotations

import pytest

from domain.services.content_type_resolver import ContentTypeResolver, extension_of
from domain.value_objects.content_type_table import CONTENT_TYPE_TABLE


class TestExtensionOf:
    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [
            ("header.jpg", ".jpg"),
            ("HEADER.JPG", ".jpg"),
            ("archive.tar.gz", ".gz"),
            ("photos/2024/header.png", ".png"),
            ("C:\\uploads\\report.PDF", ".pdf"),
            ("dir.with.dots/README", ""),
            ("README", ""),
            ("", ""),
            (None, ""),
        ],
    )
    def test_extension_of(self, file_name: str | None, expected: str) -> None:
        assert extension_of(file_name) == expected


class TestContentTypeResolver:
    """Test ContentTypeResolver lookups."""

    def test_known_extension(self, content_type_resolver: ContentTypeResolver) -> None:
        assert content_type_resolver.try_get_content_type("header.png") == (True, "image/png")

    def test_lookup_is_case_insensitive(self, content_type_resolver: ContentTypeResolver) -> None:
        assert content_type_resolver.try_get_content_type("HEADER.JPG") == (True, "image/jpeg")

    def test_unknown_extension_is_not_an_error(
        self,
        content_type_resolver: ContentTypeResolver,
    ) -> None:
        assert content_type_resolver.try_get_content_type("data.zzz") == (False, None)

    def test_no_extension(self, content_type_resolver: ContentTypeResolver) -> None:
        assert content_type_resolver.try_get_content_type("Makefile") == (False, None)
        assert content_type_resolver.get_content_type("Makefile") is None

    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [
            ("report.pdf", "application/pdf"),
            ("notes.txt", "text/plain"),
            ("clip.mp4", "video/mp4"),
            ("logo.svg", "image/svg+xml"),
            ("data.json", "application/json"),
        ],
    )
    def test_common_families(
        self,
        content_type_resolver: ContentTypeResolver,
        file_name: str,
        expected: str,
    ) -> None:
        assert content_type_resolver.get_content_type(file_name) == expected

    def test_custom_table(self) -> None:
        resolver = ContentTypeResolver({".foo": "application/x-foo"})
        assert resolver.get_content_type("a.foo") == "application/x-foo"
        assert resolver.get_content_type("a.png") is None

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            CONTENT_TYPE_TABLE[".new"] = "application/x-new"  # type: ignore[index]

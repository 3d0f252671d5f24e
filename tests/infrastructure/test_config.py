"""Tests for settings and container wiring."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from application.use_cases.object_use_cases import CreateSignedUrlUseCase, UploadObjectUseCase
from domain.value_objects.storage_options import StorageOptions
from infrastructure.config import Settings
from infrastructure.di.container import create_container


@pytest.fixture
def storage_env(monkeypatch, memory_url: str) -> None:
    monkeypatch.setenv("STORAGE_ROOT_CLIENT_PATH", "https://cdn.example.com/assets/")
    monkeypatch.setenv("STORAGE_BACKEND_URL", memory_url)
    monkeypatch.setenv("STORAGE_BACKEND_OPTIONS", '{"skip_instance_cache": true}')
    monkeypatch.setenv("DEFAULT_SIGNED_URL_DURATION_MINUTES", "15")


class TestSettings:
    def test_storage_options_from_environment(self, storage_env, memory_url: str) -> None:
        options = Settings(_env_file=None).storage_options()

        assert options.root_client_path == "https://cdn.example.com/assets"
        assert options.backend_url == memory_url
        assert options.backend_options == {"skip_instance_cache": True}
        assert options.default_signed_url_duration_minutes == 15

    def test_non_positive_default_duration(self, monkeypatch) -> None:
        monkeypatch.setenv("DEFAULT_SIGNED_URL_DURATION_MINUTES", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestContainer:
    def test_resolves_use_cases(self, storage_env) -> None:
        container = create_container(Settings(_env_file=None))

        assert container[StorageOptions].root_client_path == "https://cdn.example.com/assets"
        assert isinstance(container[UploadObjectUseCase], UploadObjectUseCase)
        assert isinstance(container[CreateSignedUrlUseCase], CreateSignedUrlUseCase)

    @pytest.mark.asyncio
    async def test_upload_through_container(self, storage_env, tmp_path) -> None:
        container = create_container(Settings(_env_file=None))
        source = tmp_path / "photo.png"
        source.write_bytes(b"\x89PNG")

        class LocalPostedFile:
            file_name = "photo.png"

            def open_read_stream(self):  # type: ignore[no-untyped-def]
                return source.open("rb")

        result = await container[UploadObjectUseCase].execute(
            LocalPostedFile(),
            "Gallery",
            slug="Holiday Photo",
        )

        assert result.unwrap().url == "https://cdn.example.com/assets/gallery/holiday-photo.png"

"""Tests for object DTO validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from application.dtos.object_dtos import CreateSignedUrlRequest


class TestCreateSignedUrlRequest:
    def test_by_url(self) -> None:
        request = CreateSignedUrlRequest(url="https://h/blog/a.jpg")
        assert request.container is None
        assert request.duration_minutes is None

    def test_by_container_and_path(self) -> None:
        request = CreateSignedUrlRequest(container="blog", object_path="a.jpg", duration_minutes=5)
        assert request.url is None

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"url": "https://h/blog/a.jpg", "container": "blog", "object_path": "a.jpg"},
            {"container": "blog"},
            {"object_path": "a.jpg"},
            {"url": "https://h/blog/a.jpg", "duration_minutes": 0},
        ],
    )
    def test_invalid_payloads(self, payload: dict) -> None:
        with pytest.raises(ValidationError):
            CreateSignedUrlRequest(**payload)

"""Tests for logging setup."""

from __future__ import annotations

import logging

from infrastructure.config import Settings
from infrastructure.logging import setup_logging


def _installed_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_object_store_handler", False)]


def test_setup_logging_is_idempotent(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("APP_ENV", "staging")
    config = Settings(_env_file=None)

    setup_logging(config)
    setup_logging(config)

    handlers = _installed_handlers()
    assert len(handlers) == 2
    assert (tmp_path / "logs").is_dir()
    assert logging.getLogger("uvicorn").handlers == handlers
    assert logging.getLogger("uvicorn").propagate is False


def test_fsspec_debug_noise_is_suppressed(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    setup_logging(Settings(_env_file=None))

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("fsspec").level == logging.INFO

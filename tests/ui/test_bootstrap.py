"""Tests for application bootstrap helpers."""

from __future__ import annotations

import logging

import pytest

from chessgrid.ui import bootstrap
from chessgrid.ui.settings import AppSettings


def test_configure_logging_uses_settings_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    bootstrap._configure_logging(AppSettings(log_level="debug"))

    assert calls[0]["level"] == logging.DEBUG


def test_configure_logging_unknown_level_falls_back(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    with caplog.at_level(logging.WARNING, logger="chessgrid.ui.bootstrap"):
        bootstrap._configure_logging(AppSettings(log_level="chatty"))

    assert calls[0]["level"] == logging.WARNING
    assert "Unknown log level" in caplog.text

"""Tests for app config — env-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdpublish.config import AppConfig


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.log_level == "INFO"
        assert config.port == 3000
        assert config.allow_raw_html is True

    def test_default_pages_path(self):
        assert AppConfig().pages_path == Path("public")

    def test_base_url_defaults_to_localhost_port(self):
        assert AppConfig(port=8080).base_url == "http://localhost:8080"

    def test_public_base_url_wins(self):
        config = AppConfig(public_base_url="https://pages.example.com/")
        assert config.base_url == "https://pages.example.com"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MDPUBLISH_PORT", "9000")
        monkeypatch.setenv("MDPUBLISH_ALLOW_RAW_HTML", "false")
        config = AppConfig()
        assert config.port == 9000
        assert config.allow_raw_html is False

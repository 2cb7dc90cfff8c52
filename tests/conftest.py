"""Shared test fixtures for mdpublish."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from mdpublish.api.app import create_app
from mdpublish.config import AppConfig
from mdpublish.core.listing import ListingService
from mdpublish.core.page_store import FileSystemPageStore
from mdpublish.core.publisher import PublishService
from mdpublish.models.pages import UploadRequest

TEST_BASE_URL = "http://pages.test"


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test pages."""
    return tmp_path


@pytest.fixture
def page_store(tmp_dir: Path) -> FileSystemPageStore:
    """Provide a fresh FileSystemPageStore in a temp directory."""
    return FileSystemPageStore(tmp_dir / "pages")


@pytest.fixture
def publisher(page_store: FileSystemPageStore) -> PublishService:
    """Provide a PublishService wired to the test page store."""
    return PublishService(page_store, TEST_BASE_URL)


@pytest.fixture
def listing(page_store: FileSystemPageStore) -> ListingService:
    """Provide a ListingService over the test page store."""
    return ListingService(page_store)


@pytest.fixture
def app_config(tmp_dir: Path) -> AppConfig:
    """Provide an AppConfig pointing at a temp page directory."""
    return AppConfig(pages_path=tmp_dir / "public")


@pytest.fixture
def client(app_config: AppConfig) -> TestClient:
    """Provide a TestClient for an app backed by the temp page directory."""
    return TestClient(create_app(app_config))


@pytest.fixture
def make_upload() -> Callable[..., UploadRequest]:
    """Factory fixture: build an UploadRequest with sensible defaults."""

    def _factory(
        data: bytes | None = b"# Hello\n\nWorld",
        filename: str | None = "hello.md",
        content_type: str | None = "text/markdown",
        **overrides: Any,
    ) -> UploadRequest:
        defaults: dict[str, Any] = {
            "data": data,
            "filename": filename,
            "content_type": content_type,
        }
        defaults.update(overrides)
        return UploadRequest(**defaults)

    return _factory

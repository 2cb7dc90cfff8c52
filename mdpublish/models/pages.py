"""Page models (immutable once created)."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from mdpublish.core.errors import MissingFileError, UnsupportedFileTypeError


class UploadRequest(BaseModel):
    """A candidate upload.  Transient; never persisted."""

    model_config = ConfigDict(frozen=True)

    filename: str | None = None
    content_type: str | None = None
    data: bytes | None = None


class RejectionReason(str, Enum):
    """Why the validator turned an upload away."""

    MISSING_FILE = "MissingFile"
    UNSUPPORTED_FILE_TYPE = "UnsupportedFileType"


class ValidationResult(BaseModel):
    """Outcome of validating an ``UploadRequest``."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    reason: RejectionReason | None = None

    def raise_for_rejection(self) -> None:
        """Raise the matching client error if this result is a rejection."""
        if self.accepted:
            return
        if self.reason == RejectionReason.MISSING_FILE:
            raise MissingFileError()
        raise UnsupportedFileTypeError()


class Page(BaseModel):
    """One persisted HTML document.

    ``size_bytes`` is derived from ``html_bytes`` and always equals the
    persisted length.  There is no update operation.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    html_bytes: bytes
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def size_bytes(self) -> int:
        return len(self.html_bytes)


class PageSummary(BaseModel):
    """Listing row for a stored page: metadata only, no content."""

    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime
    size_bytes: int


class PublishedPage(BaseModel):
    """What a successful publish hands back to the caller."""

    model_config = ConfigDict(frozen=True)

    page_id: str
    url: str
    created_at: datetime
    size_bytes: int

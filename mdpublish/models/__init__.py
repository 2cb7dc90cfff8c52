"""mdpublish data models — all Pydantic v2, all frozen (immutable)."""

from mdpublish.models.pages import (
    Page,
    PageSummary,
    PublishedPage,
    RejectionReason,
    UploadRequest,
    ValidationResult,
)

__all__ = [
    "UploadRequest",
    "RejectionReason",
    "ValidationResult",
    "Page",
    "PageSummary",
    "PublishedPage",
]

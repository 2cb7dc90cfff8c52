"""Upload validation — purely syntactic checks on upload metadata.

The validator never looks inside the bytes.  Markdown has no invalid form,
so any non-empty payload with the right name or media type is accepted.
"""

from __future__ import annotations

import logging
import os

from mdpublish.models.pages import RejectionReason, UploadRequest, ValidationResult

logger = logging.getLogger(__name__)

MARKDOWN_MEDIA_TYPE = "text/markdown"
MARKDOWN_EXTENSION = ".md"


def _media_type(declared_type: str | None) -> str:
    """Strip parameters (``; charset=...``) and normalise case."""
    if not declared_type:
        return ""
    return declared_type.split(";", 1)[0].strip().lower()


def validate(
    filename: str | None,
    declared_type: str | None,
    data: bytes | None,
) -> ValidationResult:
    """Accept or reject a candidate upload.

    Rejects with ``MISSING_FILE`` when ``data`` is absent or empty.  Otherwise
    accepts when the declared type is ``text/markdown`` or the filename
    has the ``.md`` extension (case-insensitive; a bare ``.md`` dotfile has
    no extension), and rejects with ``UNSUPPORTED_FILE_TYPE``
    when neither holds.
    """
    if not data:
        logger.debug("Rejected upload %r: missing file", filename)
        return ValidationResult(accepted=False, reason=RejectionReason.MISSING_FILE)

    if _media_type(declared_type) == MARKDOWN_MEDIA_TYPE:
        return ValidationResult(accepted=True)

    if filename and os.path.splitext(filename)[1].lower() == MARKDOWN_EXTENSION:
        return ValidationResult(accepted=True)

    logger.debug(
        "Rejected upload %r: unsupported type %r", filename, declared_type
    )
    return ValidationResult(
        accepted=False, reason=RejectionReason.UNSUPPORTED_FILE_TYPE
    )


def validate_upload(upload: UploadRequest) -> ValidationResult:
    """Convenience wrapper over ``validate`` for an ``UploadRequest``."""
    return validate(upload.filename, upload.content_type, upload.data)

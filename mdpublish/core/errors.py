"""Error taxonomy for the publish pipeline.

Client input errors (``MissingFileError``, ``UnsupportedFileTypeError``) are
detected locally and never retried.  Infrastructure errors
(``AllocatorUnavailableError``, ``ConversionFailedError``,
``StoreUnavailableError``) surface as 5xx at the HTTP boundary.

``DuplicateIdError`` sits outside the ``PublishError`` tree: it
signals a broken allocator/store contract, not a user-facing condition.
"""

from __future__ import annotations


class PublishError(RuntimeError):
    """Base class for every error that reaches the HTTP boundary."""

    code: str = "PublishError"
    message: str = "Publishing failed"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class UploadRejectedError(PublishError):
    """The upload failed validation.  No side effects have occurred."""

    code = "UploadRejected"


class MissingFileError(UploadRejectedError):
    """No file was supplied, or the supplied file is empty."""

    code = "MissingFile"
    message = "No file uploaded"


class UnsupportedFileTypeError(UploadRejectedError):
    """The upload is neither named ``*.md`` nor typed ``text/markdown``."""

    code = "UnsupportedFileType"
    message = "Only .md files are allowed"


class AllocatorUnavailableError(PublishError):
    """The entropy source behind the identifier allocator failed."""

    code = "AllocatorUnavailable"
    message = "Identifier allocator unavailable"


class ConversionFailedError(PublishError):
    """A pipeline step after validation failed.

    The underlying cause is always chained via ``raise ... from``.
    """

    code = "ConversionFailed"
    message = "Error processing the file"


class StoreUnavailableError(PublishError):
    """The page store could not be read or written."""

    code = "StoreUnavailable"
    message = "Page store unavailable"


class PageNotFoundError(PublishError):
    """No page exists under the requested identifier."""

    code = "NotFound"
    message = "Page not found"


class DuplicateIdError(RuntimeError):
    """Raised when ``put`` targets an identifier that already exists.

    Pages are immutable, so the store refuses to overwrite.  Seeing this in
    normal operation means the allocator handed out a colliding id.
    """

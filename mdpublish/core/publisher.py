"""Publish service — the end-to-end upload → page pipeline.

Lifecycle for one upload::

    validate -> decode + render -> assemble -> allocate id -> store.put -> url

Validation failures raise immediately with no side effects.  Any failure
after validation is re-raised as ``ConversionFailedError`` chained to its
cause.  ``store.put`` is the only externally observable write, so a failed
publish never leaves a partial page behind.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from mdpublish.core import identifiers
from mdpublish.core.assembler import assemble
from mdpublish.core.errors import ConversionFailedError, DuplicateIdError
from mdpublish.core.page_store import PAGE_SUFFIX, PageStore
from mdpublish.core.renderer import MarkdownRenderer
from mdpublish.core.validator import validate_upload
from mdpublish.models.pages import PublishedPage, UploadRequest

logger = logging.getLogger(__name__)


def build_page_url(base_url: str, page_id: str) -> str:
    """Externally dereferenceable URL for a stored page."""
    return f"{base_url.rstrip('/')}/{page_id}{PAGE_SUFFIX}"


class PublishService:
    """Orchestrates validation, rendering, assembly, allocation and storage.

    Parameters
    ----------
    store:
        Destination for assembled pages.
    public_base_url:
        Prefix for returned page URLs when ``publish`` is not given one.
    renderer:
        Markdown renderer.  Defaults to raw-HTML passthrough.
    """

    def __init__(
        self,
        store: PageStore,
        public_base_url: str,
        *,
        renderer: MarkdownRenderer | None = None,
    ) -> None:
        self.store = store
        self.public_base_url = public_base_url
        self.renderer = renderer or MarkdownRenderer()

    def publish(
        self, upload: UploadRequest, *, base_url: str | None = None
    ) -> PublishedPage:
        """Run the full pipeline for one upload.

        Raises
        ------
        MissingFileError, UnsupportedFileTypeError
            If the upload fails validation.
        ConversionFailedError
            If rendering, allocation or storage fails.
        """
        validate_upload(upload).raise_for_rejection()

        try:
            markdown_text = upload.data.decode("utf-8", errors="replace")
            fragment = self.renderer.render(markdown_text)
            document = assemble(fragment).encode("utf-8")
            page_id = identifiers.allocate()
            page = self.store.put(page_id, document, datetime.now(timezone.utc))
        except DuplicateIdError as exc:
            logger.critical("Identifier collision while publishing: %s", exc)
            raise ConversionFailedError(f"Identifier collision: {exc}") from exc
        except Exception as exc:
            logger.error("Publishing %r failed: %s", upload.filename, exc)
            raise ConversionFailedError(f"Error processing the file: {exc}") from exc

        url = build_page_url(base_url or self.public_base_url, page.id)
        logger.info(
            "Published %r as %s (%d bytes)", upload.filename, page.id, page.size_bytes
        )
        return PublishedPage(
            page_id=page.id,
            url=url,
            created_at=page.created_at,
            size_bytes=page.size_bytes,
        )

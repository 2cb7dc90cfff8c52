"""Durable, immutable page store.

Storage layout: {base_path}/{page_id}.html  (single flat directory)
No update or delete method — pages are immutable once stored.

Writes are all-or-nothing: the document is written and fsynced to a hidden
temp file in the same directory, then hard-linked under its final name.
``os.link`` refuses to replace an existing name, so a page can never be
overwritten, and readers only ever see complete files.

The creation time is carried in the file's mtime, so the layout stays one
file per page.  The store itself never touches a page after linking it, but
the value is only as durable as the mtime: an out-of-band ``touch``, or a
copy or restore that does not preserve timestamps, changes the reported
``created_at``.  Back up with timestamp-preserving tools (``cp -p``,
``rsync -t``).  ``put`` reports the mtime as the filesystem recorded it, so
on filesystems with coarse timestamps ``put`` and ``list`` still agree.
"""

from __future__ import annotations

import abc
import logging
import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

from mdpublish.core.errors import (
    DuplicateIdError,
    PageNotFoundError,
    StoreUnavailableError,
)
from mdpublish.core.identifiers import is_valid_id
from mdpublish.models.pages import Page, PageSummary

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".html"
_TEMP_SUFFIX = ".tmp"
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _to_ns(moment: datetime) -> int:
    """Exact nanoseconds since the epoch (naive datetimes are taken as UTC)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return ((moment - _EPOCH) // timedelta(microseconds=1)) * 1000


def _from_ns(ns: int) -> datetime:
    return _EPOCH + timedelta(microseconds=ns // 1000)


class PageStore(abc.ABC):
    """Key-value persistence for pages, keyed by page id."""

    @abc.abstractmethod
    def put(self, page_id: str, html_bytes: bytes, created_at: datetime) -> Page:
        """Persist a new page.  Raises ``DuplicateIdError`` if the id exists."""

    @abc.abstractmethod
    def get(self, page_id: str) -> bytes:
        """Return the stored document.  Raises ``PageNotFoundError``."""

    @abc.abstractmethod
    def list(self) -> list[PageSummary]:
        """Return metadata for every stored page in a stable order."""

    @abc.abstractmethod
    def exists(self, page_id: str) -> bool:
        """Check whether a page is stored under ``page_id``."""


class FileSystemPageStore(PageStore):
    """Local-directory page store, one file per page.

    Parameters
    ----------
    base_path:
        Directory holding the page files.  Created if missing.
    """

    def __init__(self, base_path: Path | str) -> None:
        self._base = Path(base_path)
        try:
            self._base.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreUnavailableError(
                f"Cannot create page directory {self._base}: {exc}"
            ) from exc

    @property
    def base_path(self) -> Path:
        return self._base

    def _page_path(self, page_id: str) -> Path:
        return self._base / f"{page_id}{PAGE_SUFFIX}"

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def put(self, page_id: str, html_bytes: bytes, created_at: datetime) -> Page:
        """Atomically persist a page under ``page_id``.

        Raises
        ------
        ValueError
            If ``page_id`` is not a canonical page identifier.
        DuplicateIdError
            If a page already exists under ``page_id``.
        StoreUnavailableError
            If the underlying directory cannot be written.
        """
        if not is_valid_id(page_id):
            raise ValueError(f"Invalid page id: {page_id!r}")

        path = self._page_path(page_id)
        if path.exists():
            raise DuplicateIdError(f"Page already exists: {page_id}")

        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._base, prefix=f".{page_id}.", suffix=_TEMP_SUFFIX
            )
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot write page {page_id}: {exc}") from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(html_bytes)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_path, 0o644)
            mtime_ns = _to_ns(created_at)
            os.utime(tmp_path, ns=(mtime_ns, mtime_ns))
            # Same inode once linked; linking leaves the mtime alone.
            recorded_ns = tmp_path.stat().st_mtime_ns
            try:
                os.link(tmp_path, path)
            except FileExistsError as exc:
                raise DuplicateIdError(f"Page already exists: {page_id}") from exc
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot write page {page_id}: {exc}") from exc
        finally:
            tmp_path.unlink(missing_ok=True)

        logger.info("Stored page %s (%d bytes)", page_id, len(html_bytes))
        return Page(
            id=page_id,
            html_bytes=html_bytes,
            created_at=_from_ns(recorded_ns),
        )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get(self, page_id: str) -> bytes:
        if not is_valid_id(page_id):
            raise PageNotFoundError(f"Page not found: {page_id}")
        try:
            return self._page_path(page_id).read_bytes()
        except FileNotFoundError as exc:
            raise PageNotFoundError(f"Page not found: {page_id}") from exc
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot read page {page_id}: {exc}") from exc

    def exists(self, page_id: str) -> bool:
        return is_valid_id(page_id) and self._page_path(page_id).is_file()

    def list(self) -> list[PageSummary]:
        """List stored pages ordered by ``(created_at, id)`` ascending."""
        if not self._base.is_dir():
            raise StoreUnavailableError(f"Page directory missing: {self._base}")

        summaries: list[PageSummary] = []
        try:
            for path in self._base.glob(f"*{PAGE_SUFFIX}"):
                page_id = path.name.removesuffix(PAGE_SUFFIX)
                if not is_valid_id(page_id):
                    continue
                try:
                    stat = path.stat()
                except FileNotFoundError:
                    # Removed out-of-band between glob and stat.
                    continue
                summaries.append(
                    PageSummary(
                        id=page_id,
                        created_at=_from_ns(stat.st_mtime_ns),
                        size_bytes=stat.st_size,
                    )
                )
        except OSError as exc:
            raise StoreUnavailableError(f"Cannot list {self._base}: {exc}") from exc

        summaries.sort(key=lambda s: (s.created_at, s.id))
        return summaries

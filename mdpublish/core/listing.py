"""Listing service — read-only projection over the page store."""

from __future__ import annotations

from mdpublish.core.page_store import PageStore
from mdpublish.models.pages import PageSummary


class ListingService:
    """Enumerates published pages.  Never computes anything of its own."""

    def __init__(self, store: PageStore) -> None:
        self.store = store

    def list_published(self) -> list[PageSummary]:
        """Return every stored page; empty when nothing has been published.

        Raises ``StoreUnavailableError`` if the store cannot be read.
        """
        return self.store.list()

"""mdpublish: upload Markdown, get back a published HTML page.

Pipeline: validate -> render (markdown-it-py) -> assemble -> allocate id
-> store -> url.  Served over HTTP by a FastAPI app and driven locally by a
Typer CLI.
"""

__version__ = "0.1.0"
__description__ = "Markdown-to-webpage conversion and publishing service"

from mdpublish.core.listing import ListingService
from mdpublish.core.page_store import FileSystemPageStore, PageStore
from mdpublish.core.publisher import PublishService

__all__ = [
    "PublishService",
    "ListingService",
    "PageStore",
    "FileSystemPageStore",
    "__version__",
]

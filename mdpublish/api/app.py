"""FastAPI application — upload, listing, page retrieval and health routes.

Usage::

    uvicorn mdpublish.api.app:create_app --factory
    # or via CLI:
    mdpublish serve
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile as StarletteUploadFile

from mdpublish import __version__
from mdpublish.api.schemas import (
    ErrorResponse,
    FileEntry,
    FileListResponse,
    HealthResponse,
    UploadResponse,
)
from mdpublish.config import AppConfig
from mdpublish.core.errors import (
    PageNotFoundError,
    PublishError,
    StoreUnavailableError,
    UploadRejectedError,
)
from mdpublish.core.listing import ListingService
from mdpublish.core.page_store import FileSystemPageStore
from mdpublish.core.publisher import PublishService, build_page_url
from mdpublish.core.renderer import MarkdownRenderer
from mdpublish.models.pages import UploadRequest

logger = logging.getLogger(__name__)

UPLOAD_SUCCESS_MESSAGE = "File uploaded and converted successfully"
UPLOAD_FIELD = "file"


def _status_for(exc: PublishError) -> int:
    if isinstance(exc, UploadRejectedError):
        return 400
    if isinstance(exc, PageNotFoundError):
        return 404
    if isinstance(exc, StoreUnavailableError):
        return 503
    return 500


async def _publish_error_handler(request: Request, exc: PublishError) -> JSONResponse:
    status = _status_for(exc)
    if status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
        # Server-side causes stay in the log.
        message = exc.message
    else:
        message = exc.detail
    body = ErrorResponse(error=message, code=exc.code)
    return JSONResponse(status_code=status, content=body.model_dump())


def create_app(app_config: AppConfig | None = None) -> FastAPI:
    """Build the HTTP application around a filesystem page store.

    Parameters
    ----------
    app_config:
        Runtime configuration.  A fresh ``AppConfig`` (environment-driven)
        is used when omitted.
    """
    cfg = app_config or AppConfig()

    store = FileSystemPageStore(cfg.pages_path)
    renderer = MarkdownRenderer(allow_raw_html=cfg.allow_raw_html)
    publisher = PublishService(store, cfg.base_url, renderer=renderer)
    listing = ListingService(store)

    app = FastAPI(
        title="Markdown to Webpage API",
        version=__version__,
        description="API for converting Markdown files to webpages",
        debug=cfg.debug,
    )
    app.state.config = cfg
    app.state.store = store
    app.state.publisher = publisher
    app.state.listing = listing

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PublishError, _publish_error_handler)

    def _base_url(request: Request) -> str:
        # Without a configured public URL, links point back at this server.
        return cfg.public_base_url or str(request.base_url)

    @app.post(
        "/upload",
        response_model=UploadResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        openapi_extra={
            "requestBody": {
                "required": True,
                "content": {
                    "multipart/form-data": {
                        "schema": {
                            "type": "object",
                            "properties": {
                                UPLOAD_FIELD: {"type": "string", "format": "binary"}
                            },
                            "required": [UPLOAD_FIELD],
                        }
                    }
                },
            }
        },
    )
    async def upload(request: Request) -> UploadResponse:
        """Upload a Markdown file, convert it to HTML, and return its URL.

        Expects a multipart body with a single file part named ``file``.  A
        missing part, or a plain text field under that name, is a missing file.
        """
        form = await request.form()
        file = form.get(UPLOAD_FIELD)
        if not isinstance(file, StarletteUploadFile):
            upload_request = UploadRequest()
        else:
            upload_request = UploadRequest(
                filename=file.filename,
                content_type=file.content_type,
                data=await file.read(),
            )
        published = await run_in_threadpool(
            publisher.publish, upload_request, base_url=_base_url(request)
        )
        return UploadResponse(message=UPLOAD_SUCCESS_MESSAGE, url=published.url)

    @app.get(
        "/files",
        response_model=FileListResponse,
        responses={503: {"model": ErrorResponse}},
    )
    def list_files(request: Request) -> FileListResponse:
        """List every published page with its creation time and size."""
        base_url = _base_url(request)
        return FileListResponse(
            files=[
                FileEntry(
                    id=summary.id,
                    created_at=summary.created_at,
                    size=summary.size_bytes,
                    url=build_page_url(base_url, summary.id),
                )
                for summary in listing.list_published()
            ]
        )

    @app.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        """Liveness check."""
        return HealthResponse()

    @app.get(
        "/{page_id}.html",
        response_class=Response,
        responses={404: {"model": ErrorResponse}},
    )
    def get_page(page_id: str) -> Response:
        """Serve a published page."""
        return Response(
            content=store.get(page_id), media_type="text/html; charset=utf-8"
        )

    return app

"""HTTP request/response schemas (wire shapes for the browser frontend)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Response for POST /upload."""

    message: str
    url: str


class FileEntry(BaseModel):
    """One published page as shown in the frontend file grid."""

    id: str
    created_at: datetime = Field(serialization_alias="createdAt")
    size: int
    url: str


class FileListResponse(BaseModel):
    """Response for GET /files."""

    files: list[FileEntry]


class ErrorResponse(BaseModel):
    error: str
    code: str


class HealthResponse(BaseModel):
    status: str = "OK"
    message: str = "Server is running"

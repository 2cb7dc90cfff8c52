"""HTTP interface — FastAPI application factory."""

from mdpublish.api.app import create_app

__all__ = ["create_app"]

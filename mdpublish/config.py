"""Application configuration — env-driven via pydantic-settings.

Reads from a .env file and MDPUBLISH_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Runtime configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export MDPUBLISH_PORT=8080
        export MDPUBLISH_PAGES_PATH=/srv/pages
        export MDPUBLISH_PUBLIC_BASE_URL=https://pages.example.com

    Or via .env file::

        MDPUBLISH_LOG_LEVEL=DEBUG
        MDPUBLISH_ALLOW_RAW_HTML=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MDPUBLISH_",
        env_file_encoding="utf-8",
    )

    # Runtime
    log_level: str = "INFO"
    debug: bool = False

    # Storage
    pages_path: Path = Path("public")

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 3000
    public_base_url: str | None = None  # defaults to http://localhost:{port}
    cors_origins: list[str] = ["*"]

    # Rendering policy: pass raw HTML in Markdown through unescaped
    allow_raw_html: bool = True

    @property
    def base_url(self) -> str:
        """Prefix used for published page URLs."""
        if self.public_base_url:
            return self.public_base_url.rstrip("/")
        return f"http://localhost:{self.port}"

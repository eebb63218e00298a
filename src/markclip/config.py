# -*- coding: utf-8 -*-
"""
Service configuration using Pydantic BaseSettings.
"""
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FRONTMATTER = (
    "---\n"
    "created: {date:YYYY-MM-DDTHH:mm:ss} (UTC {date:Z})\n"
    "tags: [{keywords}]\n"
    "source: {baseURI}\n"
    "author: {byline}\n"
    "---\n"
    "\n"
    "# {pageTitle}\n"
    "\n"
    "> ## Excerpt\n"
    "> {excerpt}\n"
    "\n"
    "---"
)


class Settings(BaseSettings):
    """
    Central service configuration loaded from environment variables.
    Values can also come from a .env file in the working directory.
    """

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8001

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"

    # API Documentation (disable in production for security)
    DOCS_ENABLED: bool = True

    # API Key for /normalize, /render and /convert (empty = open access)
    API_KEY: str = ""

    # CORS
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = False

    # Request tracking
    REQUEST_ID_HEADER: str = "X-Request-ID"

    # Compression
    GZIP_MIN_SIZE: int = 1000

    # ==========================================================================
    # Conversion Pipeline Configuration
    # ==========================================================================

    # Reject Markdown bodies larger than this many characters
    MAX_MARKDOWN_CHARS: int = 5_000_000

    # Run the Markdown normalizer over the converted body
    ENABLE_NORMALIZATION: bool = True

    # Wrap the body with rendered frontmatter/backmatter
    INCLUDE_TEMPLATE: bool = False

    # Default templates (overridable per request)
    TITLE_TEMPLATE: str = "{pageTitle}"
    FRONTMATTER_TEMPLATE: str = DEFAULT_FRONTMATTER
    BACKMATTER_TEMPLATE: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Global configuration instance
settings = Settings()

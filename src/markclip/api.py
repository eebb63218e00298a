# -*- coding: utf-8 -*-
"""
FastAPI API for the Markdown clipping service.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from . import __version__
from .auth import RequireApiKey
from .config import settings
from .logging_config import setup_logging
from .middleware import PayloadSizeMiddleware, RequestIDMiddleware
from .models import (
    ConvertRequest,
    ConvertResponse,
    HealthResponse,
    NormalizeRequest,
    NormalizeResponse,
    RenderRequest,
    RenderResponse,
)
from .normalizer import markdown_normalizer
from .pipeline import conversion_pipeline
from .renderer import template_renderer

# Setup structured logging
setup_logging()
logger = logging.getLogger(__name__)


# noinspection PyUnusedLocal
@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifecycle management."""
    logger.info("Starting markclip service", extra={"version": __version__})
    yield
    logger.info("Shutting down markclip service")


app = FastAPI(
    title="markclip",
    description="Markdown normalization and template rendering for web clippings",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url="/redoc" if settings.DOCS_ENABLED else None,
)

# Middleware stack (order matters: last added = first executed)
app.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MIN_SIZE)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(PayloadSizeMiddleware)
app.add_middleware(RequestIDMiddleware)


def _check_size(markdown: str) -> None:
    if len(markdown) > settings.MAX_MARKDOWN_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"Markdown body exceeds {settings.MAX_MARKDOWN_CHARS} characters",
        )


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Service health endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/normalize", response_model=NormalizeResponse)
async def normalize(request: NormalizeRequest, _auth: RequireApiKey) -> NormalizeResponse:
    """
    Normalize converter Markdown.

    - **markdown**: Markdown text to canonicalize
    """
    _check_size(request.markdown)
    markdown = markdown_normalizer.normalize(request.markdown)
    logger.info(
        "Normalize completed",
        extra={"input_chars": len(request.markdown), "output_chars": len(markdown)},
    )
    return NormalizeResponse(markdown=markdown, content_length=len(markdown))


@app.post("/render", response_model=RenderResponse)
async def render(request: RenderRequest, _auth: RequireApiKey) -> RenderResponse:
    """
    Render a placeholder template against page metadata.

    - **template**: Template string (defaults to {pageTitle})
    - **metadata**: Page metadata record
    """
    result = template_renderer.render(request.template, request.metadata.to_record())
    return RenderResponse(result=result)


@app.post("/convert", response_model=ConvertResponse)
async def convert(request: ConvertRequest, _auth: RequireApiKey) -> ConvertResponse:
    """
    Assemble the final document: title, normalized body, frontmatter and backmatter.
    """
    try:
        result = conversion_pipeline.process(
            request.markdown,
            request.metadata.to_record(),
            title_template=request.title_template,
            frontmatter_template=request.frontmatter_template,
            backmatter_template=request.backmatter_template,
            include_template=request.include_template,
        )
    except ValueError as e:
        raise HTTPException(status_code=413, detail=str(e))

    return ConvertResponse(
        title=result.title or "",
        markdown=result.markdown,
        content_length=len(result.markdown),
        steps_applied=result.steps_applied,
    )

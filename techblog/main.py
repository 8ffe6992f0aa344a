"""
Tech Blog

FastAPI app serving blog pages rendered from the generated blog data.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from techblog.config import Settings, get_settings
from techblog.middleware import (
    RenderErrorMiddleware,
    RequestIDMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
    StaticCacheMiddleware,
)
from techblog.routers import blog
from techblog.services.loader import DataSource, load_blog_data

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

settings = get_settings()


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: report where blog data comes from at startup."""
    result = load_blog_data()
    logger.info(
        "Serving %d posts (source: %s, environment: %s)",
        len(result.data.posts),
        result.source.value,
        settings.environment,
    )
    yield


configure_logging(settings)

app = FastAPI(
    title="Tech Blog",
    description="Markdown blog rendered from generated blog data",
    version=VERSION,
    lifespan=lifespan,
)

# Innermost first: errors become pages before headers and logging see them
app.add_middleware(RenderErrorMiddleware)
app.add_middleware(StaticCacheMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.get("/api/health")
async def health_check() -> JSONResponse:
    """Report which data source is being served."""
    result = load_blog_data()
    degraded = get_settings().use_artifact_file and result.source is not DataSource.ARTIFACT
    body: dict[str, Any] = {
        "status": "degraded" if degraded else "ok",
        "service": "techblog",
        "version": VERSION,
        "data_source": result.source.value,
        "posts": len(result.data.posts),
    }
    if degraded:
        logger.warning("Health check degraded, serving %s", result.source.value)
    return JSONResponse(content=body)


app.mount(
    "/static",
    StaticFiles(directory=settings.resolve(settings.static_dir), check_dir=False),
    name="static",
)
app.include_router(blog.router)

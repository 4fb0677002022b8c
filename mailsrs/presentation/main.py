"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..infrastructure.config.settings import get_settings
from ..infrastructure.logging import configure_logging
from .api.v1 import v1_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """アプリケーションのライフサイクル管理。

    Args:
        app: FastAPIアプリケーション

    Yields:
        None
    """
    # 起動時の処理
    logger = configure_logging(get_settings())
    logger.info("Mail SRS API %s starting", __version__)

    yield


app = FastAPI(
    title="Mail SRS API",
    description="Sender Rewriting Scheme address rewriting",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(v1_router, prefix="/api")


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Mail SRS API", "version": __version__}


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}

"""FastAPI application main entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from .middleware import register_error_handlers
from .routes import files
from ..services.config import get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the configured source roots on startup."""
    for root in get_config().source_roots():
        if root.directory.is_dir():
            logger.info("Serving %s from %s", root.source_id, root.directory)
        else:
            logger.warning(
                "Source %s not found at %s; it will appear empty", root.source_id, root.directory
            )
    yield


app = FastAPI(
    title="My Memory API",
    description="Personal knowledge base: merged file tree and document lookup",
    version="0.1.0",
    lifespan=lifespan,
)

config = get_config()

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(files.router, tags=["files"])


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


__all__ = ["app"]

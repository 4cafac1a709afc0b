"""
Blog Lists preview API

Thin FastAPI app that runs the blog list builder over posted documents.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bloglists.config import get_settings
from bloglists.middleware import RequestIDLogFilter, RequestIDMiddleware
from bloglists.routers import preview

logger = logging.getLogger(__name__)

settings = get_settings()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(request_id)s): %(message)s"


def configure_logging(debug: bool) -> None:
    """Install a root handler that includes the request ID."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIDLogFilter())
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO, handlers=[handler]
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    configure_logging(settings.debug)
    logger.info("Blog lists preview API starting (%s)", settings.environment)
    yield


app = FastAPI(
    title="Blog Lists API",
    description="Preview latest, featured, sorted and yearly blog post lists",
    version="0.1.0",
    lifespan=lifespan,
)

# Request IDs
app.add_middleware(RequestIDMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(preview.router, prefix="/api/bloglists")


@app.get("/api/bloglists/health")
async def health_check() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok", "service": "bloglists-api", "version": "0.1.0"}

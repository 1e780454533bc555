"""
Alumni Directory — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from alumni.config import CSV_URL, LOG_LEVEL, schema_label
from alumni.data.loader import load_directory
from alumni.data.store import DirectoryStore
from alumni.logging import configure_logging, get_logger
from alumni.api.dependencies import set_store
from alumni.api.router_meta import router as meta_router
from alumni.api.router_people import router as people_router
from alumni.api.router_search import router as search_router

logger = get_logger(__name__)


def create_app(store: Optional[DirectoryStore] = None) -> FastAPI:
    """Build the API. A pre-filled ``store`` skips the startup fetch."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(LOG_LEVEL)
        directory = store if store is not None else DirectoryStore()
        set_store(directory)
        if store is None:
            logger.info("startup_load", url=CSV_URL, schema=schema_label())
            await load_directory(directory)
        logger.info(
            "directory_ready",
            status=directory.status.value,
            records=directory.row_count(),
        )
        yield
        set_store(None)

    app = FastAPI(
        title="Alumni Directory API",
        description="Searchable people directory built from a published spreadsheet",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(people_router)
    app.include_router(search_router)

    return app


app = create_app()

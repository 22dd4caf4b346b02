"""
Employee Records Backend API Server
Record CRUD over a MongoDB collection, plus the web client pages
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import httpx
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .api.routes import health, records
from .config.settings import Settings
from .database.connection import DocumentStore
from .utils.error_handling import setup_error_handling
from .web import views
from .web.api_client import RecordApiClient

logger = logging.getLogger(__name__)

# Base URL for in-process calls; never leaves the process
IN_PROCESS_BASE_URL = "http://records-backend"


def create_app(settings: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """
    Build the API application.

    The document store is connected by the lifespan, so a store that cannot
    be reached stops the server at startup. In production the web client
    pages and the static bundle are served from this same application.
    """
    settings = settings or Settings.from_env()
    document_store = store or DocumentStore(settings.database_url, settings.database_name)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await document_store.connect()
        app.state.store = document_store
        if settings.is_production:
            app.state.api_client = RecordApiClient(
                httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url=IN_PROCESS_BASE_URL)
            )
        yield
        if settings.is_production:
            await app.state.api_client.aclose()
        await document_store.close()

    app = FastAPI(
        title="Employee Records Backend",
        description="REST API for employee records stored in MongoDB",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    if not settings.is_production:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    setup_error_handling(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(records.router, prefix="/record", tags=["Records"])

    if settings.is_production:
        app.include_router(views.router, tags=["Web"])
        _serve_static_bundle(app, Path(settings.static_dir))

    return app


def create_web_app(settings: Optional[Settings] = None, api_client: Optional[RecordApiClient] = None) -> FastAPI:
    """Build the standalone web client used in development, talking to API_URL"""
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = api_client or RecordApiClient.for_base_url(settings.api_url)
        app.state.api_client = client
        yield
        await client.aclose()

    app = FastAPI(title="Employee Records Web Client", lifespan=lifespan)
    app.state.settings = settings

    setup_error_handling(app)
    app.include_router(views.router, tags=["Web"])

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    return app


def _serve_static_bundle(app: FastAPI, static_dir: Path):
    """Serve the static bundle and fall back to index.html for unmatched paths"""
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning(f"Static directory '{static_dir}' not found - only API routes will be served")

    index_file = static_dir / "index.html"

    @app.get("/{full_path:path}", include_in_schema=False)
    async def client_entry(full_path: str):
        if not index_file.is_file():
            raise HTTPException(status_code=404, detail="Not Found")
        return FileResponse(index_file)

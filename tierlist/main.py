# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — FastAPI Application Entry Point
Creates the app, registers lifespan events, CORS, routers,
and global error handlers.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tierlist.api.middleware.error_handler import register_error_handlers
from tierlist.api.routes import tier_list
from tierlist.config import get_settings
from tierlist.utils.logger import configure_logging, get_logger

log = get_logger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Startup: configure logging and report the active limits.
    """
    # ── Startup ──────────────────────────────────────────────────────────────
    configure_logging()
    settings = get_settings()

    log.info(
        "tierlist_startup",
        version=VERSION,
        canvas_width=settings.canvas_width,
        max_items=settings.max_items,
        max_canvas_height=settings.max_canvas_height,
        image_timeout_ms=settings.image_timeout_ms,
        max_image_mb=settings.max_image_mb,
    )
    yield

    # ── Shutdown ─────────────────────────────────────────────────────────────
    log.info("tierlist_shutdown")


def create_app() -> FastAPI:
    app = FastAPI(
        title="TierList",
        summary="Render ranked tier lists to PNG.",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # ── CORS ─────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # ── Error Handlers ───────────────────────────────────────────────────────
    register_error_handlers(app)

    # ── Routers ──────────────────────────────────────────────────────────────
    app.include_router(tier_list.router)

    # ── Health Check ─────────────────────────────────────────────────────────
    @app.get("/health", tags=["health"], summary="Health check")
    async def health() -> dict:
        return {
            "status": "ok",
            "service": "tierlist",
            "version": VERSION,
        }

    return app


# Module-level app instance for uvicorn
app = create_app()

"""
FastAPI application factory.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import get_settings
from .core.errors import DocumentError
from .core.flags import get_flags
from .core.storage import close_store, get_store
from .api.router import router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Pastebin",
        description="Paste-style document storage",
        version="1.0.0",
        docs_url="/docs" if settings.env == "development" else None,
        redoc_url="/redoc" if settings.env == "development" else None,
    )

    # ── CORS ─────────────────────────────────────────────────────
    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Errors ───────────────────────────────────────────────────
    @app.exception_handler(DocumentError)
    async def document_error_handler(request: Request, exc: DocumentError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
        )

    # ── Startup ──────────────────────────────────────────────────
    @app.on_event("startup")
    async def on_startup():
        logging.basicConfig(
            level=getattr(logging, settings.log_level.upper(), logging.INFO),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        logger.info("Starting Pastebin (env=%s)", settings.env)

        flags = get_flags()
        logger.info(
            "Flags: redis=%s static_documents=%s",
            flags.use_redis, flags.serve_static_documents,
        )
        logger.info(
            "Keys: length=%d generator=%s max_length=%s",
            settings.key_length, settings.key_generator, settings.max_length,
        )

        if flags.serve_static_documents and settings.static_documents:
            from .services.static_documents import load_static_documents
            await load_static_documents(get_store(), settings.static_documents)

        logger.info("Pastebin is ready")

    # ── Shutdown ─────────────────────────────────────────────────
    @app.on_event("shutdown")
    async def on_shutdown():
        await close_store()
        logger.info("Pastebin shut down")

    # ── Routes ───────────────────────────────────────────────────
    app.include_router(router)

    return app

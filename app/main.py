from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api import chat, static
from app.api.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.core.settings import get_settings
from app.core.supervisor import ProcessSupervisor
from app.dependencies import get_conversation_relay
from app.middleware.cors import CORSHeadersMiddleware
from app.middleware.error_handling import ErrorHandlingMiddleware

logger = logging.getLogger(__name__)


def create_app(supervisor: ProcessSupervisor | None = None) -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if supervisor is not None:
            supervisor.install(asyncio.get_running_loop())
        # Fails startup when the API key is missing.
        get_conversation_relay()
        logger.info(
            "Chat relay ready (model=%s, static_dir=%s)",
            settings.gemini_model,
            settings.static_dir,
        )
        yield

    docs_enabled = settings.environment != "prod"
    app = FastAPI(
        title=settings.app_name,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    # Last added runs first: CORS wraps the error handler so 500s get headers too.
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(CORSHeadersMiddleware, allow_origin=settings.cors_origin)

    register_exception_handlers(app)

    app.include_router(chat.router, prefix="/api")

    # Catch-all GET; must stay last.
    app.include_router(static.router)

    return app


app = create_app()

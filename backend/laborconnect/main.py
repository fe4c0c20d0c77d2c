"""
Main FastAPI application
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import Settings, settings as default_settings
from .core.exceptions import register_exception_handlers
from .api.router import api_router
from .api.chat import chat_websocket
from .services.chat_relay import ChatRelay
from .storage import EntityStore, create_store

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[Settings] = None, store: Optional[EntityStore] = None) -> FastAPI:
    """
    Build the application

    Args:
        settings: Settings to use (defaults to environment-loaded settings)
        store: Entity store to use (defaults to the one STORAGE_BACKEND selects)
    """
    settings = settings or default_settings
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.store.close()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Labor marketplace connecting workers and employers",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.store = store if store is not None else create_store(settings)
    app.state.chat_relay = ChatRelay(app.state.store)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix=settings.API_PREFIX)
    app.add_api_websocket_route(settings.CHAT_WS_PATH, chat_websocket)

    # Health check endpoints
    @app.get("/")
    async def root():
        return {
            "message": f"{settings.APP_NAME} API is running!",
            "status": "healthy",
            "version": settings.APP_VERSION,
            "endpoints": ["/", "/health", "/docs", settings.API_PREFIX, settings.CHAT_WS_PATH]
        }

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "service": "laborconnect",
            "storage": settings.STORAGE_BACKEND,
            "records": app.state.store.stats(),
            "chat_connections": app.state.chat_relay.active_connections
        }

    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} ready (storage: {settings.STORAGE_BACKEND})")
    return app


app = create_app()

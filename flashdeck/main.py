"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from flashdeck.config import configure_logging, get_settings
from flashdeck.database import dispose_engine, initialize_database
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.rate_limit import limiter
from flashdeck.infrastructure.common.routers import settings as settings_router
from flashdeck.infrastructure.decks.routers import cards_router, deck_cards_router, decks_router

settings = get_settings()
configure_logging(settings.ENVIRONMENT)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the database engine on startup and dispose of it on shutdown."""
    initialize_database(settings)
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        ai_enabled=settings.ai_enabled,
    )
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FlashdeckError)
async def flashdeck_error_handler(request: Request, exc: FlashdeckError) -> JSONResponse:
    """Render domain errors that escaped an action boundary."""
    logger.warning(
        "flashdeck_error", path=request.url.path, status_code=exc.status_code, error=exc.message
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(decks_router, prefix=settings.API_V1_PREFIX)
app.include_router(deck_cards_router, prefix=settings.API_V1_PREFIX)
app.include_router(cards_router, prefix=settings.API_V1_PREFIX)
app.include_router(settings_router.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    return {"name": settings.PROJECT_NAME, "version": settings.VERSION}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}

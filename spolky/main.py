"""
Vstupní bod FastAPI / FastAPI entry point.
Psí spolky - evidence spolků, psů, výstav a auditu změn stanov.
"""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware

from spolky.api import api_router
from spolky.config import settings
from spolky.database import async_session, init_db
from spolky.errors import register_exception_handlers
from spolky.logging_config import configure_logging
from spolky.rate_limit import limiter
from spolky.utils.seed import seed_admin

logger = logging.getLogger("spolky")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start a ukončení / Startup and shutdown."""
    configure_logging()
    # Kontrola SECRET_KEY v produkci / Validate SECRET_KEY in production
    if not settings.DEBUG and settings.SECRET_KEY == "change-me-in-production":
        raise RuntimeError("CRITICAL: SECRET_KEY must be changed in production!")

    # Vytvořit tabulky při startu / Create tables on startup
    await init_db()
    if settings.SEED_ADMIN:
        async with async_session() as session:
            await seed_admin(session)
    logger.info("%s %s started", settings.APP_NAME, settings.APP_VERSION)
    yield


# Swagger jen při vývoji / Swagger only in development
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Evidence psích spolků / Canine-club administration backend",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "X-Requested-With", "X-Request-ID"],
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Bezpečnostní hlavičky / Add security headers."""

    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


app.add_middleware(SecurityHeadersMiddleware)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Unikátní X-Request-ID pro každý požadavek / Add unique X-Request-ID to each request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        response: Response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


app.add_middleware(RequestIDMiddleware)

# Routy API / API routes
app.include_router(api_router)


@app.get("/api/")
async def api_health():
    """Health check."""
    return {"app": settings.APP_NAME, "version": settings.APP_VERSION, "status": "running"}


@app.get("/")
async def root():
    """Nic tu není / Nothing here, go to /api/auth/login or /api/auth/register."""
    return {"app": settings.APP_NAME, "status": "running", "login": "/api/auth/login"}

"""Main FastAPI Application

ASGI app for the day labor marketplace. Wires middleware, exception
handlers and the v1 routers from `presentation`.

Run locally for development with:

    uvicorn main:app --reload

Keep booking logic in `application`, storage in `infrastructure`.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from core.config import settings
from core.database import init_db, close_db, health_check as db_health_check
from core.logging_config import configure_logging  # noqa: F401
from presentation.api.v1.endpoints import (
    bookings_router,
    jobs_router,
    rates_router,
)
from presentation.api.v1.error_handlers import register_exception_handlers


APP_VERSION = "1.0.0"

# Rate limiter (per client address)
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT_DEFAULT],
    enabled=settings.RATE_LIMIT_ENABLED,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info(f"🚀 Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

    await init_db()
    logger.info("✅ Database initialized")

    yield

    # Shutdown
    logger.info("👋 Shutting down gracefully...")
    await close_db()
    logger.info("✅ Database connections closed")


# Initialize FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Day labor marketplace: job postings, eligibility checks and bookings",
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)


# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Rate limiting middleware
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, lambda request, exc: JSONResponse(
    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
    content={"code": "rate_limited", "message": "Rate limit exceeded. Please try again later."}
))
app.add_middleware(SlowAPIMiddleware)


# Domain exceptions -> HTTP
register_exception_handlers(app)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler"""
    logger.opt(exception=exc).error(f"Unhandled exception on {request.method} {request.url.path}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"code": "system_error", "message": "System error. Please try again."}
    )


# Include API routes
app.include_router(jobs_router, prefix="/api/v1", tags=["Jobs"])
app.include_router(bookings_router, prefix="/api/v1", tags=["Bookings"])
app.include_router(rates_router, prefix="/api/v1", tags=["Rates"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    database_ok = await db_health_check()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": "ok" if database_ok else "unavailable",
        "version": APP_VERSION,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )

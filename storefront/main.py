# storefront/main.py

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from storefront.core import locales
from storefront.core.config import settings as config
from storefront.core.limiter import limiter
from storefront.core.logging_config import setup_logging
from storefront.data.seed import seed_if_empty
from storefront.db.session import engine, init_db
from storefront.dependencies import get_db_context
from storefront.routers import auth, cart, catalog, user

# --- Initialization ---
logger = logging.getLogger(__name__)

# --- Error handlers ---
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """Database failures are not retried: logged once and answered with a generic 500."""
    logger.error(f"Database error for request: {request.method} {request.url}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": locales.ERROR_INTERNAL})


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Global handler for every exception nothing else caught."""
    logger.critical(f"Unhandled exception for request: {request.method} {request.url}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": locales.ERROR_INTERNAL})

# --- Lifespan manager (startup and shutdown) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Application lifespan startup...")

    init_db(engine)
    logger.info("Database schema ready.")

    # One-time seed before the first request is served
    if config.SEED_ON_STARTUP:
        with get_db_context() as db:
            seed_if_empty(db)

    yield

    engine.dispose()
    logger.info("Database engine disposed.")

# --- FastAPI application ---
def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        description="Catalog, cart, wishlist and cookie session backend for the storefront",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,  # session cookies
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    api_router = APIRouter(prefix="/api")

    @api_router.get("/health", tags=["Health"])
    def health():
        return {"status": "ok"}

    api_router.include_router(auth.router, tags=["Authentication"])
    api_router.include_router(catalog.router, tags=["Catalog"])
    api_router.include_router(cart.router, tags=["Cart & Wishlist"])
    api_router.include_router(user.router, tags=["Users"])
    app.include_router(api_router)

    return app


app = create_app()


def run():
    uvicorn.run("storefront.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()

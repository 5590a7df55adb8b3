# Recipebook Units API Main Entry Point
import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from .settings import settings
from .routers.ready import router as ready_router
from .routers.units import router as units_router

# Configure structured logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("recipebook")


def create_app() -> FastAPI:
    """Build the API; rate limit and CORS origins are read from settings at call time."""
    # Rate limiter (per-IP), applied to every route by the middleware
    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])

    app = FastAPI(title="Recipebook Units API", version="0.1.0")
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(ready_router, prefix="/api", tags=["ready"])
    app.include_router(units_router, prefix="/api/units", tags=["units"])

    logger.info(f"Units API ready (rate limit {settings.rate_limit})")
    return app


app = create_app()

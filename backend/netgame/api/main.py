# =============================================================================
# Network Board Engine - HTTP Harness
# =============================================================================
"""
HTTP entry point for referees that drive the engine remotely.

Each session under /api/games is one MachinePlayer. Errors are returned
as {"error": ..., "status_code": ...} bodies.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from .routes import games

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log session store size on the way in and out"""
    logger.info("Network engine API %s up", __version__)
    yield
    logger.info("Network engine API stopping with %d open sessions",
                len(games.games_store))


app = FastAPI(
    title="Network Board Engine API",
    description="Engine sessions for the Network board game: create a "
                "session, report the opponent's moves and ask the engine "
                "for its own.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

# Referees may run from any origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(games.router, prefix="/api/games", tags=["Games"])


# =============================================================================
# Service Endpoints
# =============================================================================

@app.get("/", tags=["Service"])
async def root():
    """Service name, version and where to find the sessions"""
    return {
        "message": "Network Board Engine API",
        "version": __version__,
        "documentation": "/api/docs",
        "sessions": "/api/games",
    }


@app.get("/health", tags=["Service"])
async def health_check():
    """Liveness check with the number of open sessions"""
    return {
        "status": "healthy",
        "version": __version__,
        "sessions": len(games.games_store),
    }


# =============================================================================
# Error Bodies
# =============================================================================

@app.exception_handler(HTTPException)
async def http_error(request, exc):
    """Rejected requests: unknown session, illegal or malformed move"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "status_code": exc.status_code},
    )


@app.exception_handler(Exception)
async def unexpected_error(request, exc):
    """Anything else is a bug in the engine; log it with the traceback"""
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "status_code": 500},
    )

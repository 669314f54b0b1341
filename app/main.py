# /app/main.py

# --- Core FastAPI Imports ---
import logging
import secrets

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware
from contextlib import asynccontextmanager

# --- Application-specific Imports ---
from .core.config import settings
from .db.base import Base
from .db.database import engine
from .routers import auth_router, templates_router, websites_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once when the application starts up.
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    yield


session_secret = settings.SESSION_SECRET
if not session_secret:
    logger.warning("SESSION_SECRET not set. Using a temporary secret; sessions will not survive a restart.")
    session_secret = secrets.token_urlsafe(32)

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="AI Web Builder API",
    description="Generate, customize and download single-page business websites.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(
    SessionMiddleware,
    secret_key=session_secret,
    max_age=settings.SESSION_MAX_AGE_SECONDS,
    same_site="lax",
    https_only=settings.SESSION_HTTPS_ONLY,
)

# --- API Router Inclusion ---
app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
app.include_router(websites_router.router, prefix="/api/websites", tags=["Websites"])
app.include_router(templates_router.router, prefix="/api/templates", tags=["Templates"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "AI Web Builder backend is running!", "version": app.version}

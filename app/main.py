# /app/main.py

# --- Core FastAPI Imports ---
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

# --- Application-specific Imports ---
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging
from .db.database import init_db
from .routers import chatbot_router, sessions_router, health_router
from .services import gemini_service

logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs ONCE before the first request is served.
    setup_logging()
    init_db()
    gemini_service.init_gemini_client()
    logger.info("NotesAura backend started")
    yield
    # Nothing to tear down: the process holds no per-request state.


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="NotesAura AI Backend",
    description="Chat and file-summary engine for the NotesAura study assistant.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# --- API Router Inclusion ---
app.include_router(chatbot_router.router, prefix="/api", tags=["Chat"])
app.include_router(sessions_router.router, prefix="/api/sessions", tags=["Sessions"])
app.include_router(health_router.router, prefix="/api/health", tags=["Health Check"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple liveness endpoint to confirm the API is online."""
    return {"status": "NotesAura Backend is running!", "version": app.version}

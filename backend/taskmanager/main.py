"""
FastAPI entrypoint for the Task Manager backend application.
"""
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from taskmanager.core.config import settings
from taskmanager.core.errors import register_exception_handlers
from taskmanager.core.logging_setup import setup_logging
from taskmanager.db.session import init_db
from taskmanager.api.router import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    init_db()
    logger.info(f"{settings.APP_NAME} started")
    yield


app = FastAPI(
    title="Task Manager API",
    description="Backend API for per-user tasks and categories",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan
)

register_exception_handlers(app)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Serve the browser client if it is deployed next to the API
static_dir = settings.STATIC_DIR
if static_dir and os.path.isdir(static_dir):
    app.mount("/static", StaticFiles(directory=static_dir, html=True), name="static")

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Task Manager API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}

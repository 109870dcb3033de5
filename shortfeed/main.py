# ============================================================================
# FILE: shortfeed/main.py
# ============================================================================
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from shortfeed.api.router import api_router
from shortfeed.core.errors import AppError
from shortfeed.core.logging import setup_logging
from shortfeed.config import settings
from shortfeed.services.video_service import video_service
from shortfeed.storage import get_store
import logging
import os

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    404: "not_found",
    405: "method_not_allowed",
}

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the storage backend and seed the feed on startup"""
    logger.info(f"Starting {settings.APP_NAME} ({settings.STORAGE_BACKEND} storage)")
    video_service.ensure_seeded(get_store())
    yield
    logger.info(f"Shutting down {settings.APP_NAME}")

# Create FastAPI app instance
app = FastAPI(
    title="Shortfeed API",
    description="Short-video feed with accounts, likes and comments",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.code})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "invalid_request"})

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    code = HTTP_ERROR_CODES.get(exc.status_code, "http_error")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": code},
        headers=getattr(exc, "headers", None)
    )

# Include API router
app.include_router(api_router, prefix="/api")

# Serve static files (if frontend directory exists)
frontend_path = os.path.join(os.path.dirname(__file__), "../frontend")
if os.path.exists(frontend_path):
    app.mount("/static", StaticFiles(directory=frontend_path), name="static")

@app.get("/")
async def serve_frontend():
    """Serve the landing page if it is bundled, otherwise a short banner"""
    frontend_file = os.path.join(os.path.dirname(__file__), "../frontend/index.html")
    if os.path.exists(frontend_file):
        return FileResponse(frontend_file)
    return {"message": "Shortfeed API", "version": "1.0.0", "docs": "/docs"}

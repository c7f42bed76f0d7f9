"""
Notes Backend - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
import logging

from .config import settings
from .database import database
from .routes import notes_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info("Starting Notes Backend...")

    await database.connect()

    if database.is_connected():
        logger.info("Database connected successfully")
    else:
        logger.warning("Database connection failed - note requests will fail until it is reachable")

    logger.info(f"Database: {settings.database_id}, collection: {settings.notes_collection_id}")
    logger.info(f"Server is running on port {settings.port}")

    yield

    # Shutdown
    logger.info("Shutting down Notes Backend...")
    await database.disconnect()


# Create FastAPI app
app = FastAPI(
    title="Notes API",
    description="Per-user notes backed by a document store",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_credentials=True,
    allow_origins=settings.allowed_origins.split(",") if settings.allowed_origins != "*" else ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(notes_router, prefix="/api")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler for anything a route did not recover from"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return PlainTextResponse("Something broke!", status_code=500)


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Root endpoint"""
    return "Hello from the Notes App Backend!"


@app.get("/health")
async def health_check():
    """Health check endpoint with database status"""
    db_connected = await database.check_connection()

    return {
        "status": "healthy" if db_connected else "degraded",
        "database": "connected" if db_connected else "disconnected",
    }

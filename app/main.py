"""
Phone Agent Creator - Main FastAPI Application

Creates a Vapi assistant, buys a phone number for it and connects the two,
then hands back the number and a contact card for it.
"""

import os
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from agent_creator_shared_utils.core.config import get_settings
from agent_creator_shared_utils.core.logger import setup_logging
from agent_creator_shared_utils.utils.response_helpers import create_error_json_response
from api.routes import health, agent_creation

URL_PREFIX = "/agent-creator/api/v1"

# Get settings
settings = get_settings()

# Setup logging
logger = setup_logging("agent-creator", settings.log_level)

# Create FastAPI app
app = FastAPI(
    title="Phone Agent Creator",
    description="Create an AI phone agent: assistant, phone number and the link between them",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix=f"{URL_PREFIX}/health", tags=["Health"])
app.include_router(agent_creation.router, prefix=f"{URL_PREFIX}/agents", tags=["Agent Creation"])


@app.on_event("startup")
async def startup_event():
    """Initialize the application on startup."""
    logger.info("Starting Phone Agent Creator", environment=settings.app_env)


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on application shutdown."""
    logger.info("Shutting down Phone Agent Creator")


@app.get("/")
async def root():
    """Root endpoint with basic service information."""
    return {
        "service": "Phone Agent Creator",
        "version": "1.0.0",
        "status": "running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.app_env,
        "endpoints": {
            "health": f"{URL_PREFIX}/health",
            "docs": "/docs",
            "agents": f"{URL_PREFIX}/agents",
            "contact_card": f"{URL_PREFIX}/agents/contact-card"
        }
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc) -> JSONResponse:
    """Global exception handler for unhandled errors."""
    logger.error(
        "Unhandled exception",
        request_path=str(request.url),
        error_type=type(exc).__name__,
        error=str(exc)
    )
    return create_error_json_response(
        message="An unexpected error occurred",
        status_code=500,
        error_code="internal_server_error"
    )


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", settings.port)),
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )

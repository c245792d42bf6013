#!/usr/bin/env python3
"""
Union Hub Web API - FastAPI Application

Public read endpoints for the students' union platform: the candidate
engagement leaderboard, the public-choice panel and trending blogs. All
data is read from the Directus CMS on each request.

Usage:
    uv run python -m web.backend.app

Then open:
    - http://localhost:8080/api/candidate/top - Top candidates
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from .config import get_config
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from .models.responses import HealthResponse
from .routers import (
    candidates_router,
    panel_router,
    blogs_router
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load configuration
config = get_config()

# Create FastAPI app
app = FastAPI(
    title="Union Hub API",
    description="Candidate rankings, public-choice panel and trending blogs",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Register exception handlers
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(candidates_router)
app.include_router(panel_router)
app.include_router(blogs_router)


@app.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "union-hub-web"}


def main():
    """Run the web server."""
    import uvicorn

    logger.info(f"Starting Union Hub Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"CMS: {config.cms.url}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()

"""
nn_infer API Main Application

FastAPI application exposing the model registry and single-vector forward
passes over HTTP.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time
from typing import Dict
import uvicorn

from nn_infer import __version__
from nn_infer.api.model_endpoints import router as model_router
from nn_infer.config import config


# Configure logging
config.configure_logging()
logger = logging.getLogger(__name__)


# Initialize FastAPI application
app = FastAPI(
    title="nn_infer API",
    description="Feed-forward inference endpoints for linear, logistic, softmax and MLP models",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add request processing time header for monitoring."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(round(process_time * 1000, 2))
    return response


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled error in {request.method} {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": "An unexpected error occurred. Please try again."
        }
    )


# Include routers
app.include_router(model_router)


# Root endpoint
@app.get("/")
async def root() -> Dict:
    """Root endpoint with API information."""
    return {
        "service": "nn_infer API",
        "version": __version__,
        "status": "operational",
        "endpoints": {
            "model_types": "/v1/models",
            "forward": "/v1/models/forward",
            "health_check": "/health",
            "documentation": "/docs"
        }
    }


# Health check endpoint
@app.get("/health")
async def health() -> Dict[str, str]:
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "service": "nn-infer-api"
    }


# Main entry point
def main():
    """Main entry point for the API server."""
    logger.info(f"Starting nn_infer API server on {config.api_host}:{config.api_port}...")

    uvicorn.run(
        "nn_infer.api.main:app",
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()

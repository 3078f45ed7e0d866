"""FastAPI application for the Dhamira web gateway."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.routers import analytics, auth, health, pages
from core.log_config import configure_logging
from core.metrics import metrics

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    configure_logging()
    if os.getenv("METRICS_ENABLED", "true").lower() == "true":
        metrics_port = int(os.getenv("METRICS_PORT", "8090"))
        metrics.start_metrics_server(metrics_port)
        logger.info(f"Prometheus metrics server started on port {metrics_port}")
    
    yield
    
    # Shutdown
    logger.info("Application shutting down...")


app = FastAPI(
    title="Dhamira Web Gateway",
    lifespan=lifespan
)

# Include routers
app.include_router(health.router)
app.include_router(health.health_router)  # Root level health endpoints
app.include_router(auth.router)
app.include_router(analytics.router)
app.include_router(pages.router)


def main():
    """Main entry point for the application."""
    import uvicorn
    
    configure_logging()
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    
    logger.info(f"Starting Dhamira web gateway on {host}:{port}")
    
    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=os.getenv("ENVIRONMENT") == "development"
    )


if __name__ == "__main__":
    main()

"""
Javax Bridge Service - FastAPI Application

Converts placeholder scripts into runnable Java classes and back.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from javax_bridge import __version__
from javax_bridge.config import settings, log_settings
from javax_bridge.api.routes import health, convert

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup logs the effective configuration; the converter itself is
    stateless and needs no initialization.
    """
    logger.info("=" * 60)
    logger.info("Starting Javax Bridge Service")
    logger.info("=" * 60)
    log_settings()
    logger.info(f"Service ready on port {settings.SERVICE_PORT}")

    yield

    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Javax Bridge Service",
    description="""
Converts between two forms of a Java procedure.

## Forms

| Form | Description |
|------|-------------|
| Script | Inputs are placeholder bindings, e.g. `List<Integer> scores = **score_list;` |
| Class | `main()` loads each input from `inputs/<key>.json`, prints it and calls `run()` |

## Errors

- **404 NotFound**: the class has no `public static run` method
- **422 ParseFailure**: the class cannot be parsed
""",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/javax/docs",
    redoc_url="/api/javax/redoc",
    openapi_url="/api/javax/openapi.json"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API prefix
API_PREFIX = "/api/javax"

app.include_router(health.router, prefix=API_PREFIX, tags=["Health"])
app.include_router(convert.router, prefix=f"{API_PREFIX}/convert", tags=["Convert"])


# Root health check (for direct container health checks)
@app.get("/health")
async def root_health():
    """Root health check for container/load balancer"""
    return {"status": "UP", "service": settings.SERVICE_NAME}


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Javax Bridge Service",
        "version": __version__,
        "port": settings.SERVICE_PORT,
        "endpoints": {
            "health": f"{API_PREFIX}/health",
            "script_to_class": f"{API_PREFIX}/convert/script-to-class",
            "class_to_script": f"{API_PREFIX}/convert/class-to-script",
            "docs": f"{API_PREFIX}/docs"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "javax_bridge.main:app",
        host="0.0.0.0",
        port=settings.SERVICE_PORT,
        reload=True
    )

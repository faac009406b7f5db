from fastapi import FastAPI
from typing import Any, AsyncGenerator
from .routers import site_recovery
from contextlib import asynccontextmanager
import os
import logging
from dotenv import load_dotenv

# Configure logging at module level
logging.basicConfig(
    level=logging.WARNING,  # Set default to WARNING for all loggers
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)

# Set your application loggers to DEBUG
logging.getLogger("src").setLevel(logging.DEBUG)  # All src.* modules
logging.getLogger("__main__").setLevel(logging.DEBUG)

# Keep third-party loggers at INFO or WARNING to reduce noise
logging.getLogger("uvicorn.access").setLevel(logging.INFO)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("asyncio").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[Any, Any]:
    # Load environment variables at startup
    env_path = os.path.join(os.path.dirname(__file__), "..", ".devcontainer", ".env")
    if os.path.exists(env_path):
        load_dotenv(env_path)
        logger.info(f"Loaded environment from {env_path}")
    else:
        logger.info(
            f"No .env file found at {env_path}, using system environment variables"
        )
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Site Recovery Backend",
    description="API for applying disaster recovery points to replicated workloads and tracking the resulting jobs",
    version="1.0.0",
)

# Include routers
app.include_router(site_recovery.router)


@app.get("/")
async def root() -> dict[str, Any]:
    return {
        "message": "Welcome to the Site Recovery Backend API",
        "docs_url": "/docs",
        "endpoints": {"site_recovery": "/site-recovery/"},
    }

"""Burrow - FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from burrow import __version__
from burrow.api.routes import agent
from burrow.api.schemas import HealthResponse
from burrow.api.settings_store import get_settings
from burrow.config import API_PREFIX, HOST, PORT
from burrow.utils.logging import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    logger.info(f"Burrow v{__version__} starting...")
    logger.info(f"Workspace root: {get_settings().workspace_root}")
    yield
    logger.info("Burrow stopped")


app = FastAPI(
    title="Burrow",
    description="A language-model agent confined to a single workspace directory",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(agent.router, prefix=API_PREFIX)


@app.get(f"{API_PREFIX}/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)

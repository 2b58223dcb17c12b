"""FastAPI application for bridgelens.

Note: Rate limiting and response caching of the public proxy are not part of
this service; they belong to the infrastructure in front of it.
"""

import logging
import os

import structlog
import uvicorn
from fastapi import FastAPI

from bridgelens import __version__
from bridgelens.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("BRIDGELENS_HOST", "0.0.0.0")
PORT = int(os.environ.get("BRIDGELENS_PORT", "8000"))
DEBUG = os.environ.get("BRIDGELENS_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="bridgelens",
    description="Cross-chain transaction inspection and alternative route comparison",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def configure_logging(debug: bool = DEBUG) -> None:
    """Configure structlog console output."""
    log_level = logging.DEBUG if debug else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - BRIDGELENS_HOST: Host to bind to (default: 0.0.0.0)
    - BRIDGELENS_PORT: Port to bind to (default: 8000)
    - BRIDGELENS_DEBUG: Enable debug logging and reload (default: false)
    - LIFI_BASE_URL / LIFI_API_KEY / LIFI_TIMEOUT: Upstream API settings
    """
    configure_logging()
    uvicorn.run(
        "bridgelens.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()

"""FastAPI application for the swap simulator."""

import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from swapsim import __version__
from swapsim.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("SWAPSIM_HOST", "127.0.0.1")
PORT = int(os.environ.get("SWAPSIM_PORT", "8000"))
DEBUG = os.environ.get("SWAPSIM_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (1 MB); every request is a handful of numbers
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="Swap Simulator",
    description="Constant-product (x * y = k) swap quotes and slippage",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length:
        try:
            size = int(content_length)
        except ValueError:
            return JSONResponse(status_code=400, content={"detail": "Invalid Content-Length"})
        if size > MAX_REQUEST_SIZE:
            return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - SWAPSIM_HOST: Host to bind to (default: 127.0.0.1)
    - SWAPSIM_PORT: Port to bind to (default: 8000)
    - SWAPSIM_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "swapsim.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()

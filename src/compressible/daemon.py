"""Compressible daemon - HTTP server for content-type classification.

Lets proxies and servers written in other languages share one
compressibility policy without embedding the table themselves.
"""

import logging
import os
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from . import __version__
from .classifier import Classification, classify
from .mime_db import COMPRESSIBLE_TYPES

# Configuration
HOST = os.environ.get("COMPRESSIBLE_DAEMON_HOST", "127.0.0.1")
PORT = int(os.environ.get("COMPRESSIBLE_DAEMON_PORT", "18766"))
MAX_BATCH = int(os.environ.get("COMPRESSIBLE_MAX_BATCH", "1000"))

# Names understood by both logging and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(value: str | None) -> str:
    """Normalize a log level name, falling back to INFO when it is not recognized."""
    level = (value or DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


_RAW_LOG_LEVEL = os.environ.get("COMPRESSIBLE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
LOG_LEVEL = resolve_log_level(_RAW_LOG_LEVEL)

# Logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("compressible.daemon")
# basicConfig is a no-op if the root logger was already configured
logger.setLevel(LOG_LEVEL)

if _RAW_LOG_LEVEL.strip().upper() != LOG_LEVEL:
    logger.warning(f"Unknown COMPRESSIBLE_LOG_LEVEL {_RAW_LOG_LEVEL!r}, using {LOG_LEVEL}")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Startup and shutdown logic."""
    logger.info(
        f"Compressible daemon starting on {HOST}:{PORT} "
        f"({len(COMPRESSIBLE_TYPES)} known compressible types)"
    )
    yield
    logger.info("Compressible daemon shutting down")


app = FastAPI(
    title="Compressible Daemon",
    description="Decide whether a content type is worth compressing",
    version=__version__,
    lifespan=lifespan,
)


# Request/Response models
class ClassifyRequest(BaseModel):
    """Request to classify a batch of content types."""

    content_types: list[str] = Field(
        ..., min_length=1, description="Content types, parameters allowed"
    )


class ClassifyResponse(BaseModel):
    """Classification of a single content type."""

    content_type: str
    essence: str | None = None  # None when the input is not a valid media type
    compressible: bool
    reason: str

    @classmethod
    def from_classification(cls, result: Classification) -> "ClassifyResponse":
        return cls(
            content_type=result.content_type,
            essence=result.essence,
            compressible=result.compressible,
            reason=result.reason.value,
        )


@app.get("/health")
async def health():
    """Health check."""
    return {
        "status": "ok",
        "version": __version__,
        "known_types": len(COMPRESSIBLE_TYPES),
    }


@app.get("/compressible", response_model=ClassifyResponse)
async def compressible(content_type: str = Query(..., description="Content type to check")):
    """Classify a single content type."""
    return ClassifyResponse.from_classification(classify(content_type))


@app.post("/classify", response_model=list[ClassifyResponse])
async def classify_batch(request: ClassifyRequest):
    """Classify a batch of content types, preserving input order."""
    if len(request.content_types) > MAX_BATCH:
        raise HTTPException(
            status_code=413,
            detail=f"Batch of {len(request.content_types)} exceeds limit of {MAX_BATCH}",
        )

    results = [classify(ct) for ct in request.content_types]
    compressible_count = sum(1 for r in results if r.compressible)
    logger.debug(f"Classified {len(results)} content types, {compressible_count} compressible")
    return [ClassifyResponse.from_classification(r) for r in results]


def main():
    """Run the daemon."""
    reload_mode = "--reload" in sys.argv
    uvicorn.run(
        "compressible.daemon:app",
        host=HOST,
        port=PORT,
        reload=reload_mode,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()

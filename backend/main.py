"""Main FastAPI application."""

import logging
import sys
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from backend.config import settings
from backend.api.routes import schema, generation
from GYSQL.utils.error_handling import PipelineError, create_error_response, log_error_with_context

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ],
)

# Disable uvicorn access logs (we'll use our own)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    logger.info(f"BACKEND STARTUP: {settings.api_title} v{settings.api_version} ready")
    yield
    logger.info("BACKEND: Shutting down")


app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    lifespan=lifespan
)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        logger.info(f"INCOMING REQUEST: {request.method} {request.url.path}")
        if request.query_params:
            logger.debug(f"  Query params: {dict(request.query_params)}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"RESPONSE: {request.method} {request.url.path} -> {response.status_code} ({process_time:.3f}s)"
        )
        return response


# Add request logging middleware (before CORS so we see all requests)
app.add_middleware(RequestLoggingMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(schema.router)
app.include_router(generation.router)


@app.exception_handler(PipelineError)
async def pipeline_error_handler(request: Request, exc: PipelineError):
    """Caller errors from the pipeline (e.g. unknown tables) become 400s."""
    log_error_with_context(exc, exc.context, level="warning")
    return JSONResponse(status_code=400, content=create_error_response(exc, exc.context))


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        workers=1,
        access_log=False  # Disable uvicorn's access log, we use our own
    )

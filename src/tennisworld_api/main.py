import time
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import __version__, handlers
from .core import Config, setup_logging
from .routes import create_api_router

logger = logging.getLogger(__name__)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """
    Build the TennisWorld API application.

    Args:
        config: Process configuration; defaults to built-in values when omitted

    Returns:
        Configured FastAPI app (config available as app.state.config)
    """
    config = config or Config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for FastAPI application"""
        logger.info(f"Starting TennisWorld API on {config.host}:{config.port}")
        logger.info(f"Logging level: {config.log_level}")
        yield
        logger.info("Shutting down TennisWorld API")

    app = FastAPI(
        title="TennisWorld API",
        description="Mock tennis rankings and user registration API",
        version=__version__,
        lifespan=lifespan
    )
    app.state.config = config

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"{request.method} {request.url.path} failed: {type(e).__name__}: {e}")
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.3f} ms")
        return response

    # Added after the logger so it wraps it: preflight requests are answered here
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        """Root endpoint"""
        return handlers.welcome()

    app.include_router(create_api_router())

    return app


def main():
    """Run with uvicorn using configuration from the environment"""
    config = Config.from_env()
    setup_logging(config)

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()

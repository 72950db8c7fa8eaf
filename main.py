"""
FastAPI Application Entry Point

Integrates:
  - Discord interactions endpoint (POST /)
  - Health checks
  - Middleware for logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 8000
"""

import logging
import random
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import Config
from content import ContentTable, categories, freeze_table, load_content_table
from transport.discord import InteractionDispatcher, router as discord_router

# Setup logging
logging.basicConfig(
    level=Config.from_env().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(
    config: Optional[Config] = None,
    content_table: Optional[ContentTable] = None,
    rng: Optional[random.Random] = None,
) -> FastAPI:
    """
    Build the application.

    Configuration and the content table are resolved in the lifespan, so a
    missing DISCORD_PUBLIC_KEY or a broken table aborts startup instead of
    failing requests.

    Args:
        config: Explicit configuration (default: read from environment)
        content_table: Explicit content table (default: per config)
        rng: Random source for content selection
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan: startup and shutdown handlers.
        """
        # Startup
        settings = config or Config.from_env()
        settings.validate()
        logging.getLogger().setLevel(settings.log_level)

        if content_table is not None:
            table = freeze_table(content_table)
        else:
            table = load_content_table(settings.content_table_path)

        app.state.dispatcher = InteractionDispatcher(
            public_key_hex=settings.discord_public_key,
            content_table=table,
            rng=rng,
        )

        logger.info("=" * 60)
        logger.info("Donger bot starting up...")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Content categories: {', '.join(categories(table))}")
        logger.info("=" * 60)

        yield

        # Shutdown
        app.state.dispatcher = None
        logger.info("Donger bot shutting down...")

    app = FastAPI(
        title="Donger Bot",
        description="Discord interactions endpoint serving dongers",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Middleware for logging
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests."""
        logger.debug(f"{request.method} {request.url.path}")
        try:
            response = await call_next(request)
            return response
        except Exception as e:
            logger.error(f"Request error: {str(e)}", exc_info=True)
            return JSONResponse(
                status_code=500,
                content={"error": "Internal server error"},
            )

    app.include_router(discord_router)

    # Health check endpoints
    @app.get("/health/live")
    async def health_live():
        """Live health check (Kubernetes liveness probe)."""
        return {"status": "alive"}

    @app.get("/health/ready")
    async def health_ready(request: Request):
        """Readiness health check (Kubernetes readiness probe)."""
        if getattr(request.app.state, "dispatcher", None) is None:
            return {"status": "not_ready", "reason": "dispatcher not initialized"}
        return {"status": "ready"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = Config.from_env()
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.environment == "development",
    )

"""FastAPI application entrypoint."""
import time
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from shopstream.api import health, streams, webhooks
from shopstream.api.responses import failure_response
from shopstream.core.config import Settings, settings
from shopstream.core.logging import logger, setup_logging
from shopstream.streams.registry import StreamRegistry, stream_registry


def create_app(
    config: Optional[Settings] = None,
    registry: Optional[StreamRegistry] = None
) -> FastAPI:
    """
    Build the API application.
    
    Args:
        config: Settings to use (defaults to the process-wide settings)
        registry: Stream registry to serve (defaults to the global registry)
        
    Returns:
        Configured FastAPI app
    """
    config = config or settings
    if registry is None:
        registry = stream_registry if config is settings else StreamRegistry.from_settings(config)
    
    app = FastAPI(
        title="ShopStream API",
        description="Live stream tracking driven by media server webhooks",
        version=config.version
    )
    app.state.settings = config
    app.state.registry = registry
    app.state.started_monotonic = time.monotonic()
    
    # Browsers, CDN and admin tools all read stream state cross-origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_credentials=False,  # Must be False when using "*" origins
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    app.include_router(health.router)
    app.include_router(streams.router)
    app.include_router(webhooks.router)
    
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return failure_response(404, "Not found")
        return failure_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))
    
    @app.on_event("startup")
    async def startup_event():
        """Log configuration on startup."""
        logger.info(f"Starting {config.service_name} {config.version} on {config.host}:{config.port}")
        logger.info(f"HLS base URL: {registry.base_url}")
        logger.info(f"Quality ladder: {', '.join(rung.label for rung in registry.ladder)}")
        logger.info("Webhook endpoints: POST /webhook/on-publish, POST /webhook/on-unpublish")
    
    @app.on_event("shutdown")
    async def shutdown_event():
        """Cleanup on shutdown."""
        logger.info(f"Shutting down {config.service_name}")
    
    return app


setup_logging()

app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "shopstream.main:app",
        host=settings.host,
        port=settings.port,
    )

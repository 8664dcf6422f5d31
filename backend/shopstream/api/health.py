"""REST endpoints for liveness and API discovery."""
import time
from fastapi import APIRouter, Depends, Request
from shopstream.api.responses import get_registry, success_body
from shopstream.streams.models import format_timestamp, utc_now
from shopstream.streams.registry import StreamRegistry

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request, registry: StreamRegistry = Depends(get_registry)):
    """
    Liveness probe for container healthchecks and uptime monitors.
    
    Returns:
        Status, version, uptime in seconds and active stream count
    """
    config = request.app.state.settings
    return success_body({
        "status": "ok",
        "service": config.service_name,
        "version": config.version,
        "uptime": int(time.monotonic() - request.app.state.started_monotonic),
        "activeStreams": await registry.get_stream_count(),
        "timestamp": format_timestamp(utc_now()),
    })


@router.get("/")
async def api_index(request: Request):
    """API discovery document."""
    config = request.app.state.settings
    return {
        "service": config.service_name,
        "version": config.version,
        "endpoints": {
            "health": "GET  /health",
            "streams": "GET  /streams",
            "stream": "GET  /streams/{key}",
            "onPublish": "POST /webhook/on-publish",
            "onUnpublish": "POST /webhook/on-unpublish",
        },
    }

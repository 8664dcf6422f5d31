"""REST endpoints for querying live streams."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from shopstream.api.responses import get_registry, success_body
from shopstream.streams.models import format_timestamp, utc_now
from shopstream.streams.registry import StreamRegistry

router = APIRouter(prefix="/streams", tags=["Streams"])


@router.get("")
async def list_streams(registry: StreamRegistry = Depends(get_registry)):
    """
    List all active streams.
    
    Returns:
        Stream count and records
    """
    streams = await registry.list_streams()
    return success_body(
        {"count": len(streams), "streams": [s.to_dict() for s in streams]},
        with_timestamp=True,
    )


@router.get("/{stream_key:path}")
async def get_stream(stream_key: str, registry: StreamRegistry = Depends(get_registry)):
    """
    Get a single active stream.
    
    Args:
        stream_key: Stream key, bare or prefixed with "live/"
    """
    stream = await registry.get_stream(stream_key)
    if stream is None:
        return JSONResponse(
            status_code=404,
            content={"success": False, "data": None, "timestamp": format_timestamp(utc_now())},
        )
    return success_body(stream.to_dict(), with_timestamp=True)

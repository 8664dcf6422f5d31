"""Response envelopes shared by all routes."""
from typing import Any, Dict, Optional
from fastapi import Request
from fastapi.responses import JSONResponse
from shopstream.streams.models import format_timestamp, utc_now
from shopstream.streams.registry import StreamRegistry


def get_registry(request: Request) -> StreamRegistry:
    """FastAPI dependency returning the registry owned by the running app."""
    return request.app.state.registry


def success_body(data: Any, with_timestamp: bool = False) -> Dict[str, Any]:
    """Wrap response data as {"success": true, "data": ...}."""
    body: Dict[str, Any] = {"success": True, "data": data}
    if with_timestamp:
        body["timestamp"] = format_timestamp(utc_now())
    return body


def failure_response(
    status_code: int,
    error: str,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """Build a {"success": false, "error": ...} response."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
        headers=headers,
    )

"""Webhook receivers for the media ingest server.

The ingest server posts here when a stream starts or stops publishing, e.g.:

    runOnPublish:   curl -s -X POST http://api:4000/webhook/on-publish   -d 'name=$MTX_PATH&remoteAddr=...'
    runOnUnpublish: curl -s -X POST http://api:4000/webhook/on-unpublish -d 'name=$MTX_PATH'

Any 4xx/5xx answer to on-publish makes the ingest server abort the stream, so
only malformed input gets a client error and nothing here returns a 5xx.
"""
from dataclasses import dataclass
from typing import Dict
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from shopstream.api.responses import failure_response, get_registry, success_body
from shopstream.core.logging import logger
from shopstream.streams.keys import canonicalize_key
from shopstream.streams.registry import StreamRegistry

router = APIRouter(prefix="/webhook", tags=["Webhooks"])

UNKNOWN_ADDRESS = "unknown"
WEBHOOK_FIELDS = ("name", "remoteAddr")


@dataclass
class WebhookEvent:
    """Stream name and publisher address extracted from a webhook body."""
    name: str
    remote_addr: str
    
    @classmethod
    def from_payload(cls, payload: Dict[str, str]) -> "WebhookEvent":
        name = (payload.get("name") or "").strip()
        remote_addr = (payload.get("remoteAddr") or "").strip() or UNKNOWN_ADDRESS
        return cls(name=name, remote_addr=remote_addr)
    
    def has_stream_name(self) -> bool:
        """True if the name is non-empty and still non-empty once normalized."""
        return bool(self.name) and bool(canonicalize_key(self.name))


async def read_webhook_payload(request: Request) -> Dict[str, str]:
    """
    Decode a webhook body sent as a URL-encoded form (the ingest server default) or JSON.
    
    Raises:
        ValueError: If a JSON body is not an object, or name/remoteAddr are not strings
        RecursionError: If a JSON body is nested too deeply to decode
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/json"):
        body = await request.json()
        if not isinstance(body, dict):
            raise ValueError("JSON webhook body must be an object")
        for field in WEBHOOK_FIELDS:
            value = body.get(field)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{field} must be a string")
        return {k: v for k, v in body.items() if isinstance(v, str)}
    
    form = await request.form()
    return {k: v for k, v in form.items() if isinstance(v, str)}


async def _read_event(request: Request, hook: str):
    """Return (event, None) or (None, error response) for a webhook request."""
    try:
        payload = await read_webhook_payload(request)
    except (ValueError, RecursionError) as e:
        logger.warning(f"[Webhook] {hook}: malformed request body: {e}")
        return None, failure_response(400, "Malformed request body")
    
    event = WebhookEvent.from_payload(payload)
    if not event.has_stream_name():
        logger.warning(f"[Webhook] {hook}: missing stream name")
        return None, failure_response(400, "Missing stream name")
    return event, None


@router.post("/on-publish")
async def on_publish(request: Request, registry: StreamRegistry = Depends(get_registry)):
    """
    Called by the ingest server when a stream starts publishing.
    
    Returns:
        The registered stream record
    """
    event, error = await _read_event(request, "on-publish")
    if error is not None:
        return error
    
    try:
        stream = await registry.register_stream(event.name, event.remote_addr)
    except Exception:
        logger.exception(f"[Webhook] on-publish: failed to register {event.name}")
        # 200 keeps the ingest server from aborting the stream
        return JSONResponse(status_code=200, content={"success": False, "error": "Internal error"})
    
    logger.info(f"[Webhook] on-publish: {event.name} from {event.remote_addr}")
    return success_body(stream.to_dict())


@router.post("/on-unpublish")
async def on_unpublish(request: Request, registry: StreamRegistry = Depends(get_registry)):
    """
    Called by the ingest server when a stream disconnects or ends.
    
    Stopping an unknown stream is a normal race (duplicate stop, or a start
    this process never saw) and is reported as success with removed=false.
    """
    event, error = await _read_event(request, "on-unpublish")
    if error is not None:
        return error
    
    try:
        existed = await registry.deregister_stream(event.name)
    except Exception:
        logger.exception(f"[Webhook] on-unpublish: failed to remove {event.name}")
        return JSONResponse(status_code=200, content={"success": False, "error": "Internal error"})
    
    logger.info(f"[Webhook] on-unpublish: {event.name} (existed={existed})")
    return success_body({"removed": existed})

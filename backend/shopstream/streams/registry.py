"""In-memory registry of currently live streams.

Kept accurate by the ingest server's publish/unpublish webhooks; there is no
polling and nothing is persisted. State lives for the lifetime of the process.
"""
import asyncio
from typing import Dict, Iterable, List, Optional, Tuple
from shopstream.core.config import Settings, settings
from shopstream.core.logging import logger
from shopstream.streams.keys import canonicalize_key, master_playlist_url, quality_playlist_url
from shopstream.streams.models import QualityLevel, QualityRung, StreamInfo, utc_now


class StreamRegistry:
    """Tracks active streams keyed by canonical stream key."""
    
    def __init__(self, base_url: str, ladder: Iterable[QualityRung]):
        """
        Initialize an empty registry.
        
        Args:
            base_url: HLS base URL used to build playlist URLs
            ladder: Quality ladder every stream is transcoded into
        """
        self.base_url = base_url.rstrip("/")
        self.ladder: Tuple[QualityRung, ...] = tuple(ladder)
        self._streams: Dict[str, StreamInfo] = {}
        self._lock = asyncio.Lock()
    
    @classmethod
    def from_settings(cls, config: Settings) -> "StreamRegistry":
        """Build a registry from the HLS base URL and quality ladder in settings."""
        ladder = [
            QualityRung(label=rung.label, bitrate=rung.bitrate, resolution=rung.resolution)
            for rung in config.quality_ladder
        ]
        return cls(config.hls_base_url, ladder)
    
    def build_stream_info(self, stream_key: str, client_ip: str) -> StreamInfo:
        """Materialize the full record for a canonical key, including playlist URLs."""
        qualities = tuple(
            QualityLevel(
                label=rung.label,
                bitrate=rung.bitrate,
                resolution=rung.resolution,
                playlist_url=quality_playlist_url(self.base_url, stream_key, rung.label),
            )
            for rung in self.ladder
        )
        return StreamInfo(
            stream_key=stream_key,
            started_at=utc_now(),
            client_ip=client_ip,
            qualities=qualities,
            master_playlist_url=master_playlist_url(self.base_url, stream_key),
        )
    
    async def register_stream(self, raw_key: str, client_ip: str) -> StreamInfo:
        """
        Register a stream that started publishing.
        
        Replaces any existing entry for the same key. Callers must reject
        empty keys; the registry stores whatever it is given.
        
        Args:
            raw_key: Stream key, optionally prefixed with "live/"
            client_ip: Publisher address as reported by the ingest server
            
        Returns:
            The newly stored stream record
        """
        key = canonicalize_key(raw_key)
        info = self.build_stream_info(key, client_ip)
        async with self._lock:
            self._streams[key] = info
        logger.info(f"Stream added: {key} from {client_ip}")
        return info
    
    async def deregister_stream(self, raw_key: str) -> bool:
        """
        Remove a stream that stopped publishing.
        
        Args:
            raw_key: Stream key, optionally prefixed with "live/"
            
        Returns:
            True if the stream was registered, False otherwise
        """
        key = canonicalize_key(raw_key)
        async with self._lock:
            existed = self._streams.pop(key, None) is not None
        if existed:
            logger.info(f"Stream removed: {key}")
        return existed
    
    async def list_streams(self) -> List[StreamInfo]:
        """Snapshot of all active streams. Order is not meaningful."""
        async with self._lock:
            return list(self._streams.values())
    
    async def get_stream(self, raw_key: str) -> Optional[StreamInfo]:
        """Get a single stream, or None if it is not live."""
        key = canonicalize_key(raw_key)
        async with self._lock:
            return self._streams.get(key)
    
    async def get_stream_count(self) -> int:
        """Get number of active streams."""
        async with self._lock:
            return len(self._streams)


# Global stream registry instance
stream_registry = StreamRegistry.from_settings(settings)

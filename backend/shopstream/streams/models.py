"""Live stream data models."""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Tuple


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO 8601 UTC with millisecond precision, e.g. 2024-01-01T12:00:00.000Z."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class QualityRung:
    """One adaptive-bitrate rendition in the quality ladder."""
    label: str  # e.g. "1080p"
    bitrate: int  # kbps
    resolution: str  # e.g. "1920x1080"


@dataclass(frozen=True)
class QualityLevel:
    """A quality rung resolved to a playlist URL for one stream."""
    label: str
    bitrate: int
    resolution: str
    playlist_url: str
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "bitrate": self.bitrate,
            "resolution": self.resolution,
            "playlistUrl": self.playlist_url,
        }


@dataclass(frozen=True)
class StreamInfo:
    """An active live stream as reported by the ingest server."""
    stream_key: str
    started_at: datetime
    client_ip: str
    qualities: Tuple[QualityLevel, ...]
    master_playlist_url: str
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON shape returned by the API."""
        return {
            "streamKey": self.stream_key,
            "startedAt": format_timestamp(self.started_at),
            "clientIp": self.client_ip,
            "qualities": [q.to_dict() for q in self.qualities],
            "masterPlaylistUrl": self.master_playlist_url,
        }

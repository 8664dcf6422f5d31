"""Stream key normalization and HLS playlist URL rules."""

# The ingest server reports paths, e.g. "live/mystream"
LIVE_PATH_PREFIX = "live/"


def canonicalize_key(raw_key: str) -> str:
    """
    Normalize a stream key for storage and lookup.
    
    Strips a single leading "live/" segment, so "live/live/x" becomes "live/x".
    
    Args:
        raw_key: Bare or path-prefixed stream key
        
    Returns:
        Canonical stream key (may be empty)
    """
    if raw_key.startswith(LIVE_PATH_PREFIX):
        return raw_key[len(LIVE_PATH_PREFIX):]
    return raw_key


def master_playlist_url(base_url: str, stream_key: str) -> str:
    """URL of the master playlist referencing every rendition of a stream."""
    return f"{base_url}/{stream_key}/master.m3u8"


def quality_playlist_url(base_url: str, stream_key: str, label: str) -> str:
    """URL of the media playlist for one rendition of a stream."""
    return f"{base_url}/{stream_key}/{label}/index.m3u8"

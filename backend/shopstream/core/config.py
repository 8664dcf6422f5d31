"""Configuration settings for the ShopStream API."""
from pydantic import BaseModel
from pydantic_settings import BaseSettings
from typing import List


class QualityRungConfig(BaseModel):
    """One rung of the adaptive-bitrate ladder produced by the transcoder."""
    label: str
    bitrate: int  # kbps
    resolution: str


# Must match the renditions written by the transcoding pipeline
DEFAULT_QUALITY_LADDER = [
    QualityRungConfig(label="1080p", bitrate=4500, resolution="1920x1080"),
    QualityRungConfig(label="720p", bitrate=2500, resolution="1280x720"),
    QualityRungConfig(label="480p", bitrate=1200, resolution="854x480"),
    QualityRungConfig(label="360p", bitrate=600, resolution="640x360"),
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Server settings
    host: str = "0.0.0.0"
    port: int = 4000
    service_name: str = "shopstream-api"
    version: str = "1.0.0"
    
    # HLS playback (NGINX serving transcoder output)
    hls_base_url: str = "http://localhost:8080/hls"
    quality_ladder: List[QualityRungConfig] = DEFAULT_QUALITY_LADDER  # JSON list in QUALITY_LADDER
    
    # CORS
    cors_allow_origins: List[str] = ["*"]
    
    # Logging
    log_level: str = "INFO"
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

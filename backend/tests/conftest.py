"""Shared fixtures for API and registry tests."""
import pytest
from fastapi.testclient import TestClient
from shopstream.core.config import Settings
from shopstream.main import create_app
from shopstream.streams.models import QualityRung
from shopstream.streams.registry import StreamRegistry

TEST_BASE_URL = "http://x/hls"

LADDER = [
    QualityRung(label="1080p", bitrate=4500, resolution="1920x1080"),
    QualityRung(label="720p", bitrate=2500, resolution="1280x720"),
    QualityRung(label="480p", bitrate=1200, resolution="854x480"),
    QualityRung(label="360p", bitrate=600, resolution="640x360"),
]


@pytest.fixture
def registry():
    """Fresh, empty registry isolated from the process-wide one."""
    return StreamRegistry(TEST_BASE_URL, LADDER)


@pytest.fixture
def client(registry):
    """Test client for an app serving the isolated registry."""
    app = create_app(Settings(hls_base_url=TEST_BASE_URL), registry=registry)
    with TestClient(app) as test_client:
        yield test_client

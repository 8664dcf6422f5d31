"""Tests for liveness, discovery and fallback routes."""


def test_health_check(client):
    """Test health payload and active stream count."""
    client.post("/webhook/on-publish", data={"name": "cam1"})
    
    response = client.get("/health")
    
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "ok"
    assert data["service"] == "shopstream-api"
    assert data["version"] == "1.0.0"
    assert data["activeStreams"] == 1
    assert data["uptime"] >= 0


def test_api_index_lists_endpoints(client):
    """Test the discovery document at the root."""
    response = client.get("/")
    
    assert response.status_code == 200
    endpoints = response.json()["endpoints"]
    assert endpoints["onPublish"] == "POST /webhook/on-publish"
    assert endpoints["onUnpublish"] == "POST /webhook/on-unpublish"


def test_unknown_route_is_json_404(client):
    """Test the not-found fallback body."""
    response = client.get("/nope")
    
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not found"}


def test_cors_headers(client):
    """Test that any origin may read stream state."""
    response = client.get("/streams", headers={"Origin": "https://shop.example"})
    
    assert response.headers["access-control-allow-origin"] == "*"


def test_method_not_allowed_keeps_allow_header(client):
    """Test that a 405 keeps its Allow header inside the JSON envelope."""
    response = client.get("/webhook/on-publish")
    
    assert response.status_code == 405
    assert response.json()["success"] is False
    assert "POST" in response.headers["allow"]

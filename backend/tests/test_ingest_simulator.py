"""Tests for the ingest simulator script, run against an in-process app."""
from ingest_simulator import fetch_streams, run_scenario, send_publish


def test_send_publish_posts_form(client):
    """Test that the simulator posts the same form fields as the media server."""
    response = send_publish("http://testserver", "live/cam9", "10.0.0.9", session=client)
    
    assert response.status_code == 200
    assert fetch_streams("http://testserver", session=client)["count"] == 1


def test_run_scenario_passes(client):
    """Test the full simulated publish/unpublish cycle."""
    results = run_scenario("http://testserver", "live/cam1", "10.0.0.5", session=client)
    
    assert len(results) == 5
    assert all(passed for _, passed in results), results

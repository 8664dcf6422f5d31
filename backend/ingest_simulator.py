#!/usr/bin/env python3
"""
Ingest server simulator for the ShopStream API.

Posts publish/unpublish webhooks the same way the media server's curl hooks
do (URL-encoded form bodies), then checks /streams after each step. Useful for
smoke-testing a running backend without an RTMP source.

Usage:
    python ingest_simulator.py [SERVER_URL] [STREAM_NAME]
"""
import sys
import requests

# Configuration
SERVER_URL = "http://localhost:4000"
STREAM_NAME = "live/cam1"
REMOTE_ADDR = "10.0.0.5"


def send_publish(base_url, name, remote_addr, session=requests):
    """POST an on-publish webhook and return the response."""
    return session.post(
        f"{base_url}/webhook/on-publish",
        data={"name": name, "remoteAddr": remote_addr},
        timeout=5
    )


def send_unpublish(base_url, name, session=requests):
    """POST an on-unpublish webhook and return the response."""
    return session.post(
        f"{base_url}/webhook/on-unpublish",
        data={"name": name},
        timeout=5
    )


def fetch_streams(base_url, session=requests):
    """GET /streams and return the decoded data object ({count, streams})."""
    response = session.get(f"{base_url}/streams", timeout=5)
    response.raise_for_status()
    return response.json()["data"]


def run_scenario(base_url, name, remote_addr, session=requests):
    """
    Run a publish -> list -> unpublish -> list -> duplicate unpublish cycle.

    Returns:
        List of (description, passed) tuples
    """
    results = []

    response = send_publish(base_url, name, remote_addr, session=session)
    results.append(("on-publish accepted", response.status_code == 200))
    stream_key = response.json().get("data", {}).get("streamKey") if response.status_code == 200 else None
    if stream_key:
        print(f"✓ Registered {stream_key}")
        print(f"  Master playlist: {response.json()['data']['masterPlaylistUrl']}")

    data = fetch_streams(base_url, session=session)
    keys = [s["streamKey"] for s in data["streams"]]
    results.append(("stream listed after publish", stream_key in keys))

    response = send_unpublish(base_url, name, session=session)
    results.append(("on-unpublish removed stream", response.status_code == 200 and response.json()["data"]["removed"] is True))

    data = fetch_streams(base_url, session=session)
    keys = [s["streamKey"] for s in data["streams"]]
    results.append(("stream gone after unpublish", stream_key not in keys))

    response = send_unpublish(base_url, name, session=session)
    results.append((
        "duplicate on-unpublish is a success",
        response.status_code == 200 and response.json()["data"]["removed"] is False
    ))

    return results


def main(argv):
    """Run the scenario against a live server."""
    base_url = argv[1] if len(argv) > 1 else SERVER_URL
    name = argv[2] if len(argv) > 2 else STREAM_NAME

    print("\n" + "=" * 70)
    print("ShopStream API - Ingest Simulator")
    print("=" * 70)
    print(f"Server: {base_url}")
    print(f"Stream: {name} from {REMOTE_ADDR}")
    print("=" * 70)

    try:
        health = requests.get(f"{base_url}/health", timeout=5)
        if health.status_code != 200:
            print(f"✗ Server returned status {health.status_code}")
            return False
        print(f"✓ Server is healthy ({health.json()['data']['activeStreams']} active streams)")

        results = run_scenario(base_url, name, REMOTE_ADDR)
    except requests.exceptions.ConnectionError:
        print(f"✗ Could not connect to server at {base_url}")
        print(f"  Make sure backend is running:")
        print(f"  cd backend && python -m uvicorn shopstream.main:app --reload --port 4000")
        return False

    print("\nSummary")
    print("=" * 70)
    for description, passed in results:
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"{status}: {description}")

    return all(passed for _, passed in results)


if __name__ == "__main__":
    try:
        success = main(sys.argv)
        sys.exit(0 if success else 1)
    except KeyboardInterrupt:
        print("\n\nExiting...")
        sys.exit(1)

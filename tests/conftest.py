import os

import httpx
import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing the app
os.environ.setdefault("SPOTIFY_API_TOKEN", "test-token")

from spotify_gateway.config import Settings
from spotify_gateway.dependencies import get_spotify_client
from spotify_gateway.main import create_app
from spotify_gateway.services.spotify_service import SpotifyClient

TEST_TOKEN = "test-token"
ARTIST_ID = "3MtohoQqvZFtmRTwzp0xSH"


class SpotifyStub:
    """Fake Spotify API: records every request and answers with a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = {
            "id": ARTIST_ID,
            "name": "Test Artist",
            "popularity": 77,
            "followers": {"href": None, "total": 1000000},
            "genres": ["indie"],
            "type": "artist",
        }
        self.error: Exception | None = None

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.payload)

    def client(self, api_token: str = TEST_TOKEN) -> SpotifyClient:
        return SpotifyClient(api_token, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def settings():
    return Settings(spotify_api_token=TEST_TOKEN, _env_file=None)


@pytest.fixture
def spotify_stub():
    return SpotifyStub()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app, spotify_stub):
    """Test client with the Spotify dependency pointed at the stub."""
    app.dependency_overrides[get_spotify_client] = lambda: spotify_stub.client()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

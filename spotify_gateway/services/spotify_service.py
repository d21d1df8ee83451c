import logging
from typing import Optional
from urllib.parse import quote

import httpx

from spotify_gateway.schemas.artist import SpotifyArtist

logger = logging.getLogger(__name__)


class SpotifyAPIError(Exception):
    """A Spotify lookup failed (transport, HTTP status or payload)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SpotifyClient:
    """Client for the Spotify Web API authenticated with a static bearer token."""

    API_BASE_URL = "https://api.spotify.com/v1"

    def __init__(
        self,
        api_token: str,
        base_url: str = API_BASE_URL,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_token = api_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {self._api_token}"},
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )

    async def get_artist(self, artist_id: str) -> SpotifyArtist:
        """
        Get an artist by Spotify ID.

        Args:
            artist_id: Spotify artist ID, e.g. "3MtohoQqvZFtmRTwzp0xSH"

        Returns:
            The artist as reported by Spotify

        Raises:
            SpotifyAPIError: on any transport, HTTP or payload failure
        """
        logger.debug(f"Fetching Spotify artist {artist_id}")

        async with self._build_client() as client:
            try:
                response = await client.get(f"/artists/{quote(artist_id, safe='')}")
            except httpx.HTTPError as e:
                raise SpotifyAPIError(str(e) or type(e).__name__) from e

            if response.is_error:
                raise SpotifyAPIError(
                    _error_message(response),
                    status_code=response.status_code,
                )

            try:
                return SpotifyArtist.model_validate(response.json())
            except ValueError as e:
                raise SpotifyAPIError(f"invalid artist payload: {e}") from e


def _error_message(response: httpx.Response) -> str:
    """Pull the message out of a Spotify error body, falling back to the status line."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if not isinstance(payload, dict):
        payload = {}

    error = payload.get("error")

    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str):
        description = payload.get("error_description")
        return f"{error}: {description}" if description else error

    return f"HTTP {response.status_code} {response.reason_phrase}".strip()

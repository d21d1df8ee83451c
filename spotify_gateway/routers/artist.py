"""Artist router exposing trimmed Spotify artist statistics."""

import logging

from fastapi import APIRouter, Response

from spotify_gateway.core.exceptions import (
    ArtistIdRequiredException,
    EncodingException,
    UpstreamException,
)
from spotify_gateway.dependencies import Spotify
from spotify_gateway.schemas.artist import ArtistStats
from spotify_gateway.services.spotify_service import SpotifyAPIError, SpotifyClient

logger = logging.getLogger(__name__)

router = APIRouter()


async def fetch_artist_stats(artist_id: str, spotify: SpotifyClient) -> bytes:
    """
    Look up one artist on Spotify and return the encoded stats body.

    The body is fully encoded before any status is chosen, so a
    serialization failure still produces a single 500 response.
    """
    if not artist_id:
        raise ArtistIdRequiredException()

    try:
        artist = await spotify.get_artist(artist_id)
    except SpotifyAPIError as e:
        logger.error(f"Spotify lookup failed for artist {artist_id}: {e}")
        raise UpstreamException(str(e)) from e

    try:
        return ArtistStats.from_spotify(artist).to_json_bytes()
    except ValueError as e:
        logger.error(f"Could not encode stats for artist {artist_id}: {e}")
        raise EncodingException(str(e)) from e


@router.get(
    "/artist/stats/{artist_id}",
    summary="Get artist stats",
)
async def get_artist_stats(artist_id: str, spotify: Spotify):
    """
    Get follower count, name and popularity for a Spotify artist.

    - 400 if the artist ID is empty
    - 500 with the Spotify error text if the lookup fails
    """
    body = await fetch_artist_stats(artist_id, spotify)
    return Response(content=body, media_type="application/json")


@router.get("/artist/stats/", include_in_schema=False)
async def get_artist_stats_missing_id(spotify: Spotify):
    body = await fetch_artist_stats("", spotify)
    return Response(content=body, media_type="application/json")

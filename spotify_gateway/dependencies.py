from typing import Annotated

from fastapi import Depends, Request

from spotify_gateway.config import Settings
from spotify_gateway.services.spotify_service import SpotifyClient


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_spotify_client(
    settings: Annotated[Settings, Depends(get_app_settings)]
) -> SpotifyClient:
    """
    Dependency that builds a Spotify client authenticated with the static token.

    A fresh client is built for every request; nothing is shared between calls.
    """
    return SpotifyClient(
        api_token=settings.spotify_api_token,
        base_url=settings.spotify_api_base_url,
        timeout=settings.spotify_request_timeout,
    )


# Type aliases for cleaner dependency injection
Spotify = Annotated[SpotifyClient, Depends(get_spotify_client)]

"""Artist schemas for the Spotify payload and the stats response."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

SOMEJUNK_VALUE = "just an extra field"


class SpotifyFollowers(BaseModel):
    """Follower block of a Spotify artist object."""
    total: Optional[int] = 0


class SpotifyArtist(BaseModel):
    """The subset of a Spotify artist object this gateway reads."""
    model_config = ConfigDict(extra="ignore")

    name: str
    popularity: int = 0
    followers: SpotifyFollowers = SpotifyFollowers()


class ArtistStats(BaseModel):
    """Trimmed projection returned by GET /artist/stats/{artistID}."""
    model_config = ConfigDict(populate_by_name=True)

    followers: int = Field(ge=0)
    artist_name: str = Field(alias="artistName")
    popularity: int  # Spotify bounds this to 0-100
    somejunk: str = SOMEJUNK_VALUE

    @classmethod
    def from_spotify(cls, artist: SpotifyArtist) -> "ArtistStats":
        return cls(
            followers=artist.followers.total or 0,
            artist_name=artist.name,
            popularity=artist.popularity,
        )

    def to_json_bytes(self) -> bytes:
        """Compact JSON using the public field names."""
        return self.model_dump_json(by_alias=True).encode("utf-8")

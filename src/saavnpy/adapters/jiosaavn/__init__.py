"""Public interface for the JioSaavn adapter."""

from __future__ import annotations

from .client import (
    JioSaavnClient,
    JioSaavnError,
    NotFoundError,
    PayloadDecodeError,
    UpstreamError,
)
from .schema import AlbumPayload, ArtistPayload, PlaylistPayload, SongPayload
from .translator import format_album, format_artist, format_playlist, format_track

__all__ = [
    "AlbumPayload",
    "ArtistPayload",
    "JioSaavnClient",
    "JioSaavnError",
    "NotFoundError",
    "PayloadDecodeError",
    "PlaylistPayload",
    "SongPayload",
    "UpstreamError",
    "format_album",
    "format_artist",
    "format_playlist",
    "format_track",
]

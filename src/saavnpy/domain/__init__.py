"""Public domain surface."""

from __future__ import annotations

from .links import EntityKind, detect_link, extract_id
from .model import (
    Album,
    AlbumResult,
    Artist,
    ArtistResult,
    Playlist,
    PlaylistResult,
    RecommendationsResult,
    SearchResult,
    Track,
    TrackResult,
)

__all__ = [
    "Album",
    "AlbumResult",
    "Artist",
    "ArtistResult",
    "EntityKind",
    "Playlist",
    "PlaylistResult",
    "RecommendationsResult",
    "SearchResult",
    "Track",
    "TrackResult",
    "detect_link",
    "extract_id",
]

"""Normalized catalog entities returned to callers.

Entities are built per request and never shared. ``to_dict`` renders the stable
camelCase shape consumers of the catalog API rely on.
"""

from __future__ import annotations

from dataclasses import dataclass, field

type DurationMs = int


@dataclass(frozen=True, slots=True, kw_only=True)
class Track:
    identifier: str
    title: str
    length: DurationMs
    uri: str | None = None
    artwork_url: str | None = None
    author: str | None = None
    encrypted_media_url: str | None = None
    album_url: str | None = None
    artist_url: str | None = None
    album_name: str | None = None
    artist_artwork_url: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "identifier": self.identifier,
            "title": self.title,
            "length": self.length,
            "uri": self.uri,
            "artworkUrl": self.artwork_url,
            "author": self.author,
            "encryptedMediaUrl": self.encrypted_media_url,
            "albumUrl": self.album_url,
            "artistUrl": self.artist_url,
            "albumName": self.album_name,
            "artistArtworkUrl": self.artist_artwork_url,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class Album:
    id: str
    name: str
    uri: str | None
    artwork_url: str
    author: str | None
    tracks: tuple[Track, ...] = field(default_factory=tuple)
    total_songs: int | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "uri": self.uri,
            "artworkUrl": self.artwork_url,
            "author": self.author,
            "tracks": [track.to_dict() for track in self.tracks],
            "totalSongs": self.total_songs,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class Artist:
    name: str
    uri: str | None
    artwork_url: str
    # Top songs only; upstream caps the count.
    tracks: tuple[Track, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "uri": self.uri,
            "artworkUrl": self.artwork_url,
            "tracks": [track.to_dict() for track in self.tracks],
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class Playlist:
    title: str
    uri: str | None
    artwork_url: str
    tracks: tuple[Track, ...] = field(default_factory=tuple)
    total_songs: int | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "title": self.title,
            "uri": self.uri,
            "artworkUrl": self.artwork_url,
            "tracks": [track.to_dict() for track in self.tracks],
            "totalSongs": self.total_songs,
        }


@dataclass(frozen=True, slots=True)
class SearchResult:
    results: tuple[Track, ...]

    def to_dict(self) -> dict[str, object]:
        return {"results": [track.to_dict() for track in self.results]}


@dataclass(frozen=True, slots=True)
class TrackResult:
    track: Track

    def to_dict(self) -> dict[str, object]:
        return {"track": self.track.to_dict()}


@dataclass(frozen=True, slots=True)
class AlbumResult:
    album: Album

    def to_dict(self) -> dict[str, object]:
        return {"album": self.album.to_dict()}


@dataclass(frozen=True, slots=True)
class ArtistResult:
    artist: Artist

    def to_dict(self) -> dict[str, object]:
        return {"artist": self.artist.to_dict()}


@dataclass(frozen=True, slots=True)
class PlaylistResult:
    playlist: Playlist

    def to_dict(self) -> dict[str, object]:
        return {"playlist": self.playlist.to_dict()}


@dataclass(frozen=True, slots=True)
class RecommendationsResult:
    tracks: tuple[Track, ...]

    def to_dict(self) -> dict[str, object]:
        return {"tracks": [track.to_dict() for track in self.tracks]}

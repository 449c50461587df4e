"""Translate JioSaavn payloads into domain entities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from saavnpy.domain.model import Album, Artist, Playlist, Track

if TYPE_CHECKING:
    from .schema import AlbumPayload, ArtistPayload, PlaylistPayload, SongPayload

LOW_RES_ARTWORK = "150x150"
HIGH_RES_ARTWORK = "500x500"


def upgrade_artwork(url: str) -> str:
    return url.replace(LOW_RES_ARTWORK, HIGH_RES_ARTWORK, 1)


def format_track(song: SongPayload) -> Track:
    info = song.more_info
    primary = info.primary_artist
    artist_image = primary.image if primary is not None else None

    return Track(
        identifier=song.id,
        title=song.title,
        length=round(info.duration * 1000),
        uri=song.perma_url,
        artwork_url=upgrade_artwork(song.image),
        author=primary.name if primary is not None else None,
        encrypted_media_url=info.encrypted_media_url,
        album_url=info.album_url,
        artist_url=primary.perma_url if primary is not None else None,
        album_name=info.album,
        artist_artwork_url=upgrade_artwork(artist_image) if artist_image else None,
    )


def format_album(album: AlbumPayload) -> Album:
    return Album(
        id=album.id,
        name=album.title,
        uri=album.perma_url,
        artwork_url=upgrade_artwork(album.image),
        author=album.subtitle,
        tracks=tuple(format_track(song) for song in album.songs),
        total_songs=album.list_count,
    )


def format_artist(artist: ArtistPayload) -> Artist:
    return Artist(
        name=artist.name,
        uri=artist.urls.overview,
        artwork_url=upgrade_artwork(artist.image),
        tracks=tuple(format_track(song) for song in artist.top_songs),
    )


def format_playlist(playlist: PlaylistPayload) -> Playlist:
    return Playlist(
        title=playlist.title,
        uri=playlist.perma_url,
        artwork_url=upgrade_artwork(playlist.image),
        tracks=tuple(format_track(song) for song in playlist.songs),
        total_songs=playlist.list_count,
    )

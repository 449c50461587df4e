"""Pydantic models describing the JioSaavn API payloads.

Only the fields the translator reads are modeled; everything else is ignored.
``more_info`` and ``image`` are required on songs, the artist map is optional.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _none_to_empty_list(value: object) -> object:
    # Empty collections sometimes arrive as "" or null.
    if value is None or value == "":
        return []
    return value


class JioSaavnBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ArtistRef(JioSaavnBaseModel):
    id: str | None = None
    name: str | None = None
    image: str | None = None
    perma_url: str | None = None

    _normalize_text = field_validator("name", "image", "perma_url", mode="before")(
        _blank_to_none
    )


class ArtistMap(JioSaavnBaseModel):
    primary_artists: list[ArtistRef] = Field(default_factory=list["ArtistRef"])

    _normalize_primary = field_validator("primary_artists", mode="before")(_none_to_empty_list)


class SongMoreInfo(JioSaavnBaseModel):
    duration: float
    album: str | None = None
    album_url: str | None = None
    encrypted_media_url: str | None = None
    artist_map: ArtistMap | None = Field(default=None, alias="artistMap")

    _normalize_text = field_validator(
        "album", "album_url", "encrypted_media_url", mode="before"
    )(_blank_to_none)

    @field_validator("duration", mode="before")
    @classmethod
    def _parse_seconds(cls, value: object) -> float:
        # null and "" mean an unknown length.
        if value is None:
            return 0.0
        if isinstance(value, str):
            value = value.strip() or 0
        try:
            seconds = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid duration: {value!r}") from exc
        if not math.isfinite(seconds):
            raise ValueError(f"Invalid duration: {value!r}")
        return seconds

    @property
    def primary_artist(self) -> ArtistRef | None:
        if self.artist_map is None or not self.artist_map.primary_artists:
            return None
        return self.artist_map.primary_artists[0]


class SongPayload(JioSaavnBaseModel):
    id: str
    title: str
    image: str
    perma_url: str | None = None
    more_info: SongMoreInfo

    _normalize_url = field_validator("perma_url", mode="before")(_blank_to_none)


class AlbumPayload(JioSaavnBaseModel):
    id: str
    title: str
    image: str
    subtitle: str | None = None
    perma_url: str | None = None
    songs: list[SongPayload] = Field(default_factory=list["SongPayload"], alias="list")
    list_count: int | None = None

    _normalize_songs = field_validator("songs", mode="before")(_none_to_empty_list)
    _normalize_count = field_validator("list_count", mode="before")(_blank_to_none)


class ArtistUrls(JioSaavnBaseModel):
    overview: str | None = None


class ArtistPayload(JioSaavnBaseModel):
    name: str
    image: str
    urls: ArtistUrls
    top_songs: list[SongPayload] = Field(default_factory=list["SongPayload"], alias="topSongs")

    _normalize_songs = field_validator("top_songs", mode="before")(_none_to_empty_list)


class PlaylistPayload(JioSaavnBaseModel):
    title: str
    image: str
    perma_url: str | None = None
    songs: list[SongPayload] = Field(default_factory=list["SongPayload"], alias="list")
    list_count: int | None = None

    _normalize_songs = field_validator("songs", mode="before")(_none_to_empty_list)
    _normalize_count = field_validator("list_count", mode="before")(_blank_to_none)


class SearchResponse(JioSaavnBaseModel):
    results: list[SongPayload] = Field(default_factory=list["SongPayload"])

    _normalize_results = field_validator("results", mode="before")(_none_to_empty_list)


class SongDetailsResponse(JioSaavnBaseModel):
    songs: list[SongPayload] = Field(default_factory=list["SongPayload"])

    _normalize_songs = field_validator("songs", mode="before")(_none_to_empty_list)


class StationResponse(JioSaavnBaseModel):
    stationid: str | None = None

    _normalize_station = field_validator("stationid", mode="before")(_blank_to_none)


class StationSongEntry(JioSaavnBaseModel):
    song: SongPayload

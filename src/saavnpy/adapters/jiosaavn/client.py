"""HTTP client for the JioSaavn web API."""

from __future__ import annotations

import json
from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ValidationError

from saavnpy.adapters.http_client import HttpClient
from saavnpy.config.jiosaavn import JioSaavnConfig
from saavnpy.domain.links import EntityKind, detect_link, extract_id
from saavnpy.domain.model import (
    AlbumResult,
    ArtistResult,
    PlaylistResult,
    RecommendationsResult,
    SearchResult,
    TrackResult,
)

from .schema import (
    AlbumPayload,
    ArtistPayload,
    PlaylistPayload,
    SearchResponse,
    SongDetailsResponse,
    StationResponse,
    StationSongEntry,
)
from .translator import format_album, format_artist, format_playlist, format_track

if TYPE_CHECKING:
    from collections.abc import Callable

    from saavnpy.config.http_client import HttpClientConfig
    from saavnpy.domain.model import Track

log = getLogger(__name__)

API_VERSION = 4
WEB_CONTEXT = "web6dot0"
ANDROID_CONTEXT = "android"
DEFAULT_PLAYLIST_LIMIT = 100
DEFAULT_RECOMMENDATION_LIMIT = 10

type QueryValue = str | int


class JioSaavnError(RuntimeError):
    """Base class for errors surfaced by :class:`JioSaavnClient`."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class UpstreamError(JioSaavnError):
    """Raised when JioSaavn answers with a non-success HTTP status."""

    def __init__(self, *, status_code: int, message: str = "Request failed") -> None:
        super().__init__(message, status_code=status_code)


class NotFoundError(JioSaavnError):
    """Raised when a response does not contain the requested record."""

    status_code = 404


class PayloadDecodeError(JioSaavnError):
    """Raised when a response body is not JSON or breaks its expected shape."""

    status_code = 502


def _default_client_factory(config: HttpClientConfig) -> HttpClient:
    return HttpClient(config)


def _as_mapping(payload: object) -> Mapping[str, object] | None:
    if isinstance(payload, Mapping) and payload:
        return payload
    return None


def _validate[M: BaseModel](model: type[M], payload: object, *, call: str) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        log.error("JioSaavn %s returned an unexpected payload: %s", call, exc)
        raise PayloadDecodeError(f"Unexpected JioSaavn payload for {call}") from exc


class JioSaavnClient:
    """Stateless client for the public JioSaavn catalog endpoints.

    Every request opens its own HTTP client through ``client_factory`` and closes
    it afterwards; nothing is cached or shared between calls.
    """

    def __init__(
        self,
        *,
        config: JioSaavnConfig | None = None,
        client_factory: Callable[[HttpClientConfig], HttpClient] | None = None,
    ) -> None:
        self._config = config or JioSaavnConfig()
        self._client_factory = client_factory or _default_client_factory

    async def search(self, query: str) -> SearchResult:
        payload = await self._request(
            "search.getResults",
            cc=self._config.country_code,
            includeMetaTags=1,
            q=query,
        )
        data = _as_mapping(payload)
        if data is None or not data.get("results"):
            log.info("JioSaavn search returned no results for %r", query)
            raise NotFoundError(f'No results found for "{query}"')

        response = _validate(SearchResponse, data, call="search.getResults")
        return SearchResult(results=tuple(format_track(song) for song in response.results))

    async def get_track_by_id(self, track_id: str) -> TrackResult:
        payload = await self._request("song.getDetails", pids=track_id)
        return TrackResult(track=self._first_song(payload, call="song.getDetails"))

    async def get_track(self, token: str) -> TrackResult:
        payload = await self._request("webapi.get", token=token, type="song")
        return TrackResult(track=self._first_song(payload, call="webapi.get"))

    async def get_album(self, token: str) -> AlbumResult:
        payload = await self._request("webapi.get", token=token, type="album")
        data = _as_mapping(payload)
        if data is None:
            raise NotFoundError("Album not found")
        return AlbumResult(album=format_album(_validate(AlbumPayload, data, call="webapi.get")))

    async def get_artist(self, token: str) -> ArtistResult:
        payload = await self._request(
            "webapi.get",
            token=token,
            type="artist",
            n_song=self._config.artist_song_count,
        )
        data = _as_mapping(payload)
        if data is None:
            raise NotFoundError("Artist not found")
        return ArtistResult(
            artist=format_artist(_validate(ArtistPayload, data, call="webapi.get"))
        )

    async def get_playlist(
        self, token: str, limit: int = DEFAULT_PLAYLIST_LIMIT
    ) -> PlaylistResult:
        payload = await self._request("webapi.get", token=token, type="playlist", n=limit)
        data = _as_mapping(payload)
        if data is None:
            raise NotFoundError("Playlist not found")
        return PlaylistResult(
            playlist=format_playlist(_validate(PlaylistPayload, data, call="webapi.get"))
        )

    async def get_recommendations(
        self, identifier: str, limit: int = DEFAULT_RECOMMENDATION_LIMIT
    ) -> RecommendationsResult:
        station_id = await self._get_station(identifier)
        if not station_id:
            raise NotFoundError("No station ID found")

        payload = await self._request(
            "webradio.getSong",
            ctx=ANDROID_CONTEXT,
            stationid=station_id,
            k=limit,
        )
        entries = payload.values() if isinstance(payload, Mapping) else ()

        # An empty feed is a valid answer, unlike the other lookups.
        tracks = tuple(
            format_track(_validate(StationSongEntry, entry, call="webradio.getSong").song)
            for entry in entries
            if isinstance(entry, Mapping) and entry.get("song")
        )
        return RecommendationsResult(tracks=tracks)

    async def resolve_link(
        self, url: str
    ) -> TrackResult | AlbumResult | ArtistResult | PlaylistResult:
        """Fetch whatever entity a JioSaavn share link points at."""

        detected = detect_link(url)
        if detected is None:
            raise NotFoundError(f"Unsupported link: {url}")

        kind, token = detected
        log.debug("Resolved %s link to token %s", kind, token)
        match kind:
            case EntityKind.TRACK:
                return await self.get_track(token)
            case EntityKind.ALBUM:
                return await self.get_album(token)
            case EntityKind.ARTIST:
                return await self.get_artist(token)
            case EntityKind.PLAYLIST:
                return await self.get_playlist(token)

    @staticmethod
    def extract_id(kind: EntityKind | str, url: str) -> str | None:
        return extract_id(kind, url)

    async def _get_station(self, identifier: str) -> str | None:
        entity_id = json.dumps([identifier])
        payload = await self._request(
            "webradio.createEntityStation",
            ctx=ANDROID_CONTEXT,
            entity_id=entity_id,
            entity_type="queue",
        )
        data = _as_mapping(payload)
        if data is None:
            return None
        return _validate(StationResponse, data, call="webradio.createEntityStation").stationid

    def _first_song(self, payload: object, *, call: str) -> Track:
        data = _as_mapping(payload)
        if data is None or not data.get("songs"):
            raise NotFoundError("Track not found")
        response = _validate(SongDetailsResponse, data, call=call)
        return format_track(response.songs[0])

    async def _request(
        self,
        call: str,
        *,
        ctx: str = WEB_CONTEXT,
        **extra: QueryValue,
    ) -> object:
        params: dict[str, QueryValue] = {
            "__call": call,
            "api_version": API_VERSION,
            "_format": "json",
            "_marker": 0,
            "ctx": ctx,
            **extra,
        }
        query_params = httpx.QueryParams(params)

        log.debug("JioSaavn request %s", call)
        async with self._client_factory(self._config.http) as client:
            response = await client.get(self._config.base_url, params=query_params)

        if not response.is_success:
            log.error("JioSaavn %s failed with HTTP %s", call, response.status_code)
            raise UpstreamError(status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise PayloadDecodeError(f"JioSaavn {call} did not return JSON") from exc

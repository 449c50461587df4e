"""Payload builders and a recording HTTP fake for JioSaavn adapter tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from saavnpy.adapters.http_client import HttpClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from saavnpy.config.http_client import HttpClientConfig

Payload = dict[str, object]


def make_song_payload(
    song_id: str = "Xq1b2c3d",
    *,
    title: str = "Kesariya",
    duration: object = "268",
    image: str = "https://c.saavncdn.com/191/Kesariya-Hindi-2022-20220717092820-150x150.jpg",
    with_artist: bool = True,
) -> Payload:
    more_info: Payload = {
        "music": "Pritam",
        "album_id": "37183485",
        "album": "Brahmastra",
        "label": "Sony Music",
        "encrypted_media_url": "ID2ieOjCrwfgWvL5sXl4B1ImC5QfbsDy",
        "album_url": "https://www.jiosaavn.com/album/brahmastra/ZTY5VQ7gWO0_",
        "duration": duration,
    }
    if with_artist:
        more_info["artistMap"] = {
            "primary_artists": [
                {
                    "id": "459320",
                    "name": "Arijit Singh",
                    "role": "singer",
                    "image": "https://c.saavncdn.com/artists/Arijit_Singh_150x150.jpg",
                    "type": "artist",
                    "perma_url": "https://www.jiosaavn.com/artist/arijit-singh-songs/LlRWpHzy3Hk_",
                },
                {
                    "id": "455130",
                    "name": "Amitabh Bhattacharya",
                    "role": "lyricist",
                    "image": "",
                    "type": "artist",
                    "perma_url": "https://www.jiosaavn.com/artist/amitabh-bhattacharya-songs/2x9cD,nU8jw_",
                },
            ],
            "featured_artists": [],
            "artists": [],
        }
    return {
        "id": song_id,
        "title": title,
        "subtitle": "Arijit Singh - Brahmastra",
        "type": "song",
        "perma_url": f"https://www.jiosaavn.com/song/kesariya/{song_id}",
        "image": image,
        "language": "hindi",
        "year": "2022",
        "more_info": more_info,
    }


def make_album_payload(*, songs: list[Payload] | None = None) -> Payload:
    tracks = songs if songs is not None else [make_song_payload("s1"), make_song_payload("s2")]
    return {
        "id": "37183485",
        "title": "Brahmastra",
        "subtitle": "Pritam, Arijit Singh",
        "type": "album",
        "perma_url": "https://www.jiosaavn.com/album/brahmastra/ZTY5VQ7gWO0_",
        "image": "https://c.saavncdn.com/191/Brahmastra-Hindi-2022-150x150.jpg",
        "list_count": str(len(tracks)),
        "list": tracks,
    }


def make_artist_payload(*, songs: list[Payload] | None = None) -> Payload:
    return {
        "artistId": "459320",
        "name": "Arijit Singh",
        "image": "https://c.saavncdn.com/artists/Arijit_Singh_150x150.jpg",
        "urls": {
            "overview": "https://www.jiosaavn.com/artist/arijit-singh-songs/LlRWpHzy3Hk_",
            "songs": "https://www.jiosaavn.com/artist/arijit-singh-songs/LlRWpHzy3Hk_/songs",
        },
        "topSongs": songs if songs is not None else [make_song_payload("t1")],
    }


def make_playlist_payload(*, songs: list[Payload] | None = None, list_count: str = "57") -> Payload:
    return {
        "id": "1134543272",
        "title": "Romantic Top 40",
        "type": "playlist",
        "perma_url": "https://www.jiosaavn.com/featured/romantic-top-40/LdbVc1Z5i9E_",
        "image": "https://c.saavncdn.com/editorial/Romantic-Top-40_150x150.jpg",
        "list_count": list_count,
        "list": songs if songs is not None else [make_song_payload("p1"), make_song_payload("p2")],
    }


type Responder = Callable[[httpx.Request], httpx.Response]


@dataclass
class RecordingTransport:
    """Routes requests by their ``__call`` parameter and remembers every request."""

    routes: dict[str, Responder | Payload | list[object]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        call = request.url.params.get("__call", "")
        route = self.routes.get(call)
        if route is None:
            return httpx.Response(status_code=404, json={"error": f"no route for {call}"})
        if callable(route):
            return route(request)
        return httpx.Response(status_code=200, json=route)

    def calls(self, name: str) -> list[httpx.Request]:
        return [request for request in self.requests if request.url.params.get("__call") == name]

    def client_factory(self) -> Callable[[HttpClientConfig], HttpClient]:
        def factory(config: HttpClientConfig) -> HttpClient:
            return HttpClient(config, transport=httpx.MockTransport(self.handle))

        return factory

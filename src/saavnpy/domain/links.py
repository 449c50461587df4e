"""Share-link parsing for JioSaavn URLs."""

from __future__ import annotations

import re
from enum import StrEnum


class EntityKind(StrEnum):
    TRACK = "track"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"


# Ordered: detect_link reports the first kind whose pattern matches.
LINK_PATTERNS: tuple[tuple[EntityKind, re.Pattern[str]], ...] = (
    (EntityKind.TRACK, re.compile(r"jiosaavn\.com/song/[^/]+/([^/]+)$")),
    (EntityKind.ALBUM, re.compile(r"jiosaavn\.com/album/[^/]+/([^/]+)$")),
    (EntityKind.ARTIST, re.compile(r"jiosaavn\.com/artist/[^/]+/([^/]+)$")),
    (
        EntityKind.PLAYLIST,
        re.compile(r"(?:jiosaavn\.com|saavn\.com)/(?:featured|s/playlist)/[^/]+/([^/]+)$"),
    ),
)

_PATTERNS_BY_KIND = dict(LINK_PATTERNS)


def extract_id(kind: EntityKind | str, url: str) -> str | None:
    """Return the trailing token of ``url`` if it is a share link for ``kind``."""

    pattern = _PATTERNS_BY_KIND[EntityKind(kind)]
    match = pattern.search(url)
    return match.group(1) if match else None


def detect_link(url: str) -> tuple[EntityKind, str] | None:
    for kind, pattern in LINK_PATTERNS:
        match = pattern.search(url)
        if match:
            return kind, match.group(1)
    return None

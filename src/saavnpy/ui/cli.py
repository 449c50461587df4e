# ruff: noqa: T201

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

import httpx
from dotenv import load_dotenv

from saavnpy.adapters.jiosaavn import JioSaavnClient, JioSaavnError
from saavnpy.config import ConfigurationError, configure_logging, get_jiosaavn_config
from saavnpy.domain.links import EntityKind, extract_id

if TYPE_CHECKING:
    from collections.abc import Awaitable, Sequence
    from types import FrameType

    from saavnpy.domain.model import (
        AlbumResult,
        ArtistResult,
        PlaylistResult,
        RecommendationsResult,
        SearchResult,
        TrackResult,
    )

    type CommandResult = (
        SearchResult
        | TrackResult
        | AlbumResult
        | ArtistResult
        | PlaylistResult
        | RecommendationsResult
    )

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, got {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value!r}")
    return number


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query the JioSaavn catalog")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search tracks")
    search.add_argument("query", help="Free-text search query")

    track = subparsers.add_parser("track", help="Fetch a single track")
    track.add_argument("id", help="Catalog id (or share-link token with --token)")
    track.add_argument(
        "--token",
        action="store_true",
        help="Treat the id as a share-link token instead of a catalog id",
    )

    album = subparsers.add_parser("album", help="Fetch an album by token")
    album.add_argument("token")

    artist = subparsers.add_parser("artist", help="Fetch an artist and their top songs")
    artist.add_argument("token")

    playlist = subparsers.add_parser("playlist", help="Fetch a playlist by token")
    playlist.add_argument("token")
    playlist.add_argument(
        "--limit",
        type=_positive_int,
        default=100,
        help="Number of songs to request (default: %(default)s)",
    )

    recommendations = subparsers.add_parser(
        "recommendations", help="Fetch songs recommended for a track"
    )
    recommendations.add_argument("id", help="Catalog id of the seed track")
    recommendations.add_argument(
        "--limit",
        type=_positive_int,
        default=10,
        help="Number of songs to request (default: %(default)s)",
    )

    resolve = subparsers.add_parser("resolve", help="Fetch whatever a share link points at")
    resolve.add_argument("url")

    extract = subparsers.add_parser("extract", help="Print the token embedded in a share link")
    extract.add_argument("kind", choices=[kind.value for kind in EntityKind])
    extract.add_argument("url")

    return parser.parse_args(list(argv))


def _dispatch(client: JioSaavnClient, args: argparse.Namespace) -> Awaitable[CommandResult]:
    if args.command == "search":
        return client.search(args.query)
    if args.command == "track":
        return client.get_track(args.id) if args.token else client.get_track_by_id(args.id)
    if args.command == "album":
        return client.get_album(args.token)
    if args.command == "artist":
        return client.get_artist(args.token)
    if args.command == "playlist":
        return client.get_playlist(args.token, args.limit)
    if args.command == "recommendations":
        return client.get_recommendations(args.id, args.limit)
    if args.command == "resolve":
        return client.resolve_link(args.url)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    parsed_args = _parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    if parsed_args.command == "extract":
        token = extract_id(parsed_args.kind, parsed_args.url)
        if token is None:
            log.error("Not a JioSaavn %s link: %s", parsed_args.kind, parsed_args.url)
            sys.exit(1)
        print(token)
        return

    try:
        client = JioSaavnClient(config=get_jiosaavn_config())
    except ConfigurationError:
        log.exception("Invalid configuration")
        sys.exit(2)

    try:
        result = asyncio.run(_dispatch(client, parsed_args))
    except JioSaavnError as exc:
        log.error("JioSaavn request failed (%s): %s", exc.status_code, exc)  # noqa: TRY400
        sys.exit(1)
    except httpx.HTTPError:
        log.exception("Network error while talking to JioSaavn")
        sys.exit(1)

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

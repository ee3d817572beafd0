"""
Main CLI entry point for podfeed
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from podfeed import __version__
from podfeed.builders import FeedConfig, Format, Quality, YtDlpDownloader, new_builder
from podfeed.core.config import CONFIG, get_api_key, validate_config
from podfeed.core.exceptions import PodfeedError
from podfeed.core.logger import get_logger, setup_exception_handler, setup_logger
from podfeed.links import parse_url

logger = get_logger(__name__)


def _cmd_parse(args: argparse.Namespace) -> int:
    info = parse_url(args.link)
    print(json.dumps({
        "provider": info.provider.value,
        "link_type": info.link_type.value,
        "item_id": info.item_id,
    }))
    return 0


async def _build(args: argparse.Namespace) -> int:
    info = parse_url(args.link)

    for warning in validate_config():
        logger.debug(f"Config: {warning}")

    builder = await new_builder(info.provider, get_api_key(info.provider), YtDlpDownloader())
    config = FeedConfig(
        id=args.id or info.item_id,
        url=args.link,
        page_size=args.page_size,
        format=Format(args.format),
        quality=Quality(args.quality),
        resolve_streams=args.resolve_streams,
    )
    feed = await builder.build(config)

    print(json.dumps({
        "id": feed.id,
        "provider": feed.provider.value,
        "link_type": feed.link_type.value,
        "item_id": feed.item_id,
        "title": feed.title,
        "author": feed.author,
        "item_url": feed.item_url,
        "episodes": [
            {
                "id": episode.id,
                "title": episode.title,
                "video_url": episode.video_url,
                "duration": episode.duration,
                "pub_date": episode.pub_date.isoformat() if episode.pub_date else None,
                "media_url": episode.media_url,
            }
            for episode in feed.episodes
        ],
    }, indent=2, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podfeed",
        description="Resolve video platform links and build podcast feeds",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Resolve a link into provider, type and id")
    parse_cmd.add_argument("link")

    build_cmd = subparsers.add_parser("build", help="Build a feed from a link and print it as JSON")
    build_cmd.add_argument("link")
    build_cmd.add_argument("--id", help="Feed id, defaults to the resolved item id")
    build_cmd.add_argument("--page-size", type=int, default=CONFIG['builder']['page_size'])
    build_cmd.add_argument("--format", choices=[f.value for f in Format], default=Format.AUDIO.value)
    build_cmd.add_argument("--quality", choices=[q.value for q in Quality], default=Quality.HIGH.value)
    build_cmd.add_argument("--resolve-streams", action="store_true",
                           help="Resolve direct media URLs (YouTube only)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.command == "parse":
            return _cmd_parse(args)
        return asyncio.run(_build(args))
    except PodfeedError as e:
        logger.error(f"❌ {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1


def cli():
    """Console script entry point"""
    setup_logger()
    setup_exception_handler()
    sys.exit(main())


if __name__ == "__main__":
    cli()

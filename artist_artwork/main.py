#!/usr/bin/env python3
"""
Artist Artwork Lookup Tool

Looks up Apple Music artist images for an artist name and prints the
candidates as JSON. Optionally downloads the best match.
"""

import argparse
import asyncio
import json
import logging
import os
import sys
import tempfile
from typing import List, Optional

import aiohttp

from artist_artwork.models.image import ImageCandidate
from artist_artwork.models.item import Item, ItemKind
from artist_artwork.services.itunes_artist_image import ITunesArtistImageProvider
from artist_artwork.shared.config import ConfigManager, config_manager


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Look up Apple Music artist images')
    parser.add_argument('artist', nargs='?', help='Artist name')
    parser.add_argument('--download', type=str, metavar='PATH',
                       help='Download the first image to PATH')
    parser.add_argument('--thumbnails', action='store_true',
                       help='Download the thumbnail instead of the full size image (requires --download)')
    parser.add_argument('--init-config', action='store_true',
                       help='Write an example config file and exit')
    parser.add_argument('-v', '--verbose', action='store_true',
                       help='Enable debug logging')
    return parser.parse_args(argv)


def create_session(config: ConfigManager) -> aiohttp.ClientSession:
    """Create the HTTP session shared by all requests of one run."""
    timeout = aiohttp.ClientTimeout(total=config.get_timeout())
    headers = {'User-Agent': config.get_user_agent()}
    return aiohttp.ClientSession(timeout=timeout, headers=headers)


async def download_image(provider: ITunesArtistImageProvider, url: str, path: str) -> None:
    """Stream an image to a file."""
    response = await provider.get_image_response(url)
    try:
        response.raise_for_status()

        # PATH only appears once the whole body is on disk
        temp_fd, temp_path = tempfile.mkstemp(dir=os.path.dirname(os.path.abspath(path)), suffix='.part')
        try:
            with open(temp_fd, 'wb') as f:
                async for chunk in response.content.iter_chunked(8192):
                    f.write(chunk)
            os.replace(temp_path, path)
        except BaseException:
            os.unlink(temp_path)
            raise
    finally:
        response.release()

    print(f"Image downloaded to: {path}", file=sys.stderr)


async def lookup(artist: str, config: ConfigManager, download: Optional[str] = None,
                 thumbnails: bool = False) -> List[ImageCandidate]:
    """Find artist images and optionally download the first one."""
    async with create_session(config) as session:
        provider = ITunesArtistImageProvider(session, search_url=config.get_search_url())
        images = await provider.get_images(Item(name=artist, kind=ItemKind.MUSIC_ARTIST))

        if download and images:
            first = images[0]
            url = first.thumbnail_url if thumbnails else first.url
            await download_image(provider, url, download)

    return images


async def main(argv: Optional[List[str]] = None, config: Optional[ConfigManager] = None) -> None:
    args = parse_args(argv)
    config = config or config_manager

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    if args.init_config:
        config.create_example_config()
        print(f"Config file: {config.config_path}")
        return

    if not args.artist:
        print("Error: an artist name is required")
        sys.exit(1)

    if args.thumbnails and not args.download:
        print("Error: --thumbnails requires --download")
        sys.exit(1)

    try:
        print(f"Looking up artist images for: {args.artist}", file=sys.stderr)
        images = await lookup(args.artist, config, args.download, args.thumbnails)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)

    if not images:
        print(f"Could not find artist images for: {args.artist}")
        sys.exit(1)

    print(json.dumps([image.to_dict() for image in images], indent=2))


def cli() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    cli()

"""Apple Music artist image provider backed by the iTunes Search API."""

import asyncio
import logging
from typing import List, Optional
from urllib.parse import quote

import aiohttp

from artist_artwork.interfaces.image_provider import RemoteImageProvider
from artist_artwork.models.artist import ArtistResult, SearchResponse
from artist_artwork.models.image import ImageCandidate, ImageType
from artist_artwork.models.item import Item
from artist_artwork.services.og_image import (
    PRIMARY_SIZE_TOKEN,
    THUMBNAIL_SIZE_TOKEN,
    extract_og_image,
    resize_artwork_url,
)

logger = logging.getLogger(__name__)


class ITunesArtistImageProvider(RemoteImageProvider):
    """Finds artist images by searching iTunes and scraping the Apple Music artist page.

    The session is shared across calls and owned by the caller. Requests
    run one at a time; a failed artist page only drops that result, while
    a failed search request is raised to the caller.
    """

    BASE_URL = "https://itunes.apple.com/search"

    def __init__(self, session: aiohttp.ClientSession, search_url: Optional[str] = None):
        self.session = session
        self.search_url = search_url or self.BASE_URL

    @property
    def name(self) -> str:
        return "Apple Music"

    @property
    def order(self) -> int:
        # After fanart
        return 1

    def get_supported_images(self, item: Item) -> List[ImageType]:
        return [ImageType.PRIMARY]

    def supports(self, item: Item) -> bool:
        return item is not None and item.is_music_artist

    def build_search_url(self, artist_name: str) -> str:
        """Build the artist search URL for a name."""
        term = quote(artist_name, safe='')
        return f"{self.search_url}?term={term}&media=music&entity=musicArtist&attribute=artistTerm"

    async def get_images(self, item: Item) -> List[ImageCandidate]:
        """Get Apple Music images for a music artist."""
        if not self.supports(item):
            logger.debug("Skipping unsupported item %r", item)
            return []

        if not item.name or not item.name.strip():
            return []

        response = await self.search(item.name)
        if response.result_count <= 0:
            logger.debug("No iTunes artists found for %s", item.name)
            return []

        images = []
        for result in response.results:
            candidate = await self._get_result_image(result)
            if candidate:
                images.append(candidate)

        return images

    async def search(self, artist_name: str) -> SearchResponse:
        """Search iTunes for artists matching a name.

        Raises:
            aiohttp.ClientError: The request failed or returned a non-2xx status
            asyncio.TimeoutError: The session timeout expired
        """
        url = self.build_search_url(artist_name)
        logger.debug("Searching iTunes: %s", url)

        async with self.session.get(url) as response:
            response.raise_for_status()
            # iTunes answers with text/javascript
            data = await response.json(content_type=None)

        return SearchResponse.from_dict(data or {})

    async def get_image_response(self, url: str) -> aiohttp.ClientResponse:
        return await self.session.get(url)

    async def _get_result_image(self, result: ArtistResult) -> Optional[ImageCandidate]:
        """Scrape the og:image of one search result's artist page."""
        if result.artist_link_url is None:
            logger.debug("No artist link for %s", result.artist_name)
            return None

        logger.debug("URL: %s", result.artist_link_url)

        html = await self._fetch_page(result.artist_link_url)
        if html is None:
            return None

        og_image = extract_og_image(html)
        if not og_image:
            logger.debug("No og:image on %s", result.artist_link_url)
            return None

        logger.debug("og:image: %s", og_image)

        return ImageCandidate(
            provider_name=self.name,
            url=resize_artwork_url(og_image, PRIMARY_SIZE_TOKEN),
            thumbnail_url=resize_artwork_url(og_image, THUMBNAIL_SIZE_TOKEN),
            type=ImageType.PRIMARY
        )

    async def _fetch_page(self, url: str) -> Optional[str]:
        """Download an artist page, None if it could not be fetched."""
        try:
            async with self.session.get(url) as response:
                if response.status != 200:
                    logger.debug("Artist page %s returned status %s", url, response.status)
                    return None

                return await response.text()

        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.debug("Error fetching artist page %s: %s", url, e)
            return None

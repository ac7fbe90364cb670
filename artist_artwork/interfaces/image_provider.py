"""Interface for remote image providers called by the media-server host."""

from abc import ABC, abstractmethod
from typing import List

import aiohttp

from artist_artwork.models.image import ImageCandidate, ImageType
from artist_artwork.models.item import Item


class RemoteImageProvider(ABC):
    """Abstract interface for looking up remote images for library items."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name shown by the host."""
        pass

    @property
    def order(self) -> int:
        """Position of this provider when the host runs several of them."""
        return 0

    @abstractmethod
    def get_supported_images(self, item: Item) -> List[ImageType]:
        """Get the image types this provider can supply for an item.

        Args:
            item: Library item

        Returns:
            List of supported image types
        """
        pass

    @abstractmethod
    def supports(self, item: Item) -> bool:
        """Check whether this provider handles the given item."""
        pass

    @abstractmethod
    async def get_images(self, item: Item) -> List[ImageCandidate]:
        """Look up remote images for an item.

        Args:
            item: Library item

        Returns:
            List of image candidates, empty if nothing was found
        """
        pass

    @abstractmethod
    async def get_image_response(self, url: str) -> aiohttp.ClientResponse:
        """Fetch an image URL and return the raw response.

        Args:
            url: Image URL, typically one of the candidate URLs

        Returns:
            The unread response; the caller is responsible for releasing it
        """
        pass

"""Open Graph image extraction and artwork size handling."""

import re
from typing import Optional

from bs4 import BeautifulSoup

# Size token Apple Music puts in og:image URLs (1200x630, crop to width)
OG_IMAGE_SIZE_TOKEN = "1200x630cw"
THUMBNAIL_SIZE_TOKEN = "100x100cc"
# The artwork size can vary quite a bit, 1400x1400 is plenty for artist images.
# https://artists.apple.com/support/88-artist-image-guidelines
PRIMARY_SIZE_TOKEN = "1400x1400cc"

_OG_IMAGE_SIZE_PATTERN = re.compile(re.escape(OG_IMAGE_SIZE_TOKEN), re.IGNORECASE)


def extract_og_image(html: str) -> Optional[str]:
    """Get the og:image URL from an HTML document.

    Only a meta element that is a direct child of <head>, itself a direct
    child of <html>, is considered, with an exact match on
    property="og:image".

    Args:
        html: Page source

    Returns:
        The content attribute, or None if the tag or its value is missing
    """
    soup = BeautifulSoup(html, 'html.parser')

    root = soup.find('html', recursive=False)
    if not root:
        return None

    head = root.find('head', recursive=False)
    if not head:
        return None

    meta = head.find('meta', attrs={'property': 'og:image'}, recursive=False)
    if not meta:
        return None

    content = meta.get('content')
    if not content or not content.strip():
        return None

    return content.strip()


def resize_artwork_url(url: str, size_token: str) -> str:
    """Swap the og:image size token for another one, ignoring case."""
    return _OG_IMAGE_SIZE_PATTERN.sub(lambda _: size_token, url)

"""Remote image model returned to the host."""

from dataclasses import dataclass
from enum import Enum


class ImageType(Enum):
    """Image roles this provider can supply."""
    PRIMARY = "Primary"


@dataclass(frozen=True)
class ImageCandidate:
    """A remote image a provider offers for an item."""
    provider_name: str
    url: str
    thumbnail_url: str
    type: ImageType = ImageType.PRIMARY

    def to_dict(self) -> dict:
        """Convert candidate to dictionary for JSON output."""
        return {
            'provider_name': self.provider_name,
            'url': self.url,
            'thumbnail_url': self.thumbnail_url,
            'type': self.type.value
        }

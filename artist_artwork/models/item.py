"""Host item model handed to image providers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ItemKind(Enum):
    """Classification the host assigns to a library item."""
    MUSIC_ARTIST = "MusicArtist"
    MUSIC_ALBUM = "MusicAlbum"
    AUDIO = "Audio"
    MUSIC_VIDEO = "MusicVideo"
    MOVIE = "Movie"
    SERIES = "Series"
    BOOK = "Book"


@dataclass
class Item:
    """Library item metadata model."""
    name: Optional[str]
    kind: Optional[ItemKind] = None

    @property
    def is_music_artist(self) -> bool:
        return self.kind is ItemKind.MUSIC_ARTIST

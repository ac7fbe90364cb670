"""iTunes Search API response model for artist searches."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ArtistResult:
    """One artist entry from the search results."""
    artist_link_url: Optional[str] = None
    artist_name: Optional[str] = None
    artist_id: Optional[int] = None
    primary_genre_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'ArtistResult':
        return cls(
            artist_link_url=data.get('artistLinkUrl'),
            artist_name=data.get('artistName'),
            artist_id=data.get('artistId'),
            primary_genre_name=data.get('primaryGenreName')
        )


@dataclass
class SearchResponse:
    """Search API response body."""
    result_count: int = 0
    results: List[ArtistResult] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> 'SearchResponse':
        """Build a response from the decoded JSON body.

        Entries that are not JSON objects are ignored, missing keys fall
        back to an empty response.
        """
        results = [
            ArtistResult.from_dict(entry)
            for entry in data.get('results') or []
            if isinstance(entry, dict)
        ]
        return cls(result_count=int(data.get('resultCount') or 0), results=results)

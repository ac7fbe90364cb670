"""Test fixtures for artist_artwork tests."""

import json
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, List, Optional, Union
from unittest.mock import MagicMock

import aiohttp
import pytest

from artist_artwork.models.item import Item, ItemKind
from artist_artwork.services.itunes_artist_image import ITunesArtistImageProvider


class FakeContent:
    """Stand-in for aiohttp's StreamReader."""

    def __init__(self, body: bytes, error: Optional[BaseException] = None) -> None:
        self._body = body
        self.error = error

    async def iter_chunked(self, size: int) -> AsyncIterator[bytes]:
        for start in range(0, len(self._body), size):
            yield self._body[start:start + size]
            # Connection drops after the first chunk
            if self.error is not None:
                raise self.error


class FakeResponse:
    """Stand-in for aiohttp.ClientResponse serving a canned body."""

    def __init__(self, url: str, body: Union[str, bytes] = b"", status: int = 200,
                 content_type: str = "application/json") -> None:
        self.url = url
        self.status = status
        self.content_type = content_type
        self._body = body.encode() if isinstance(body, str) else body
        self.content = FakeContent(self._body)
        self.released = False

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                request_info=MagicMock(),
                history=(),
                status=self.status,
                message="Error",
            )

    async def json(self, content_type: Optional[str] = "application/json") -> Any:
        if content_type is not None and content_type not in self.content_type:
            raise aiohttp.ContentTypeError(
                request_info=MagicMock(),
                history=(),
                status=self.status,
                message=f"Attempt to decode JSON with unexpected mimetype: {self.content_type}",
            )
        return json.loads(self._body.decode())

    async def text(self) -> str:
        return self._body.decode()

    async def read(self) -> bytes:
        return self._body

    def release(self) -> None:
        self.released = True


Route = Union[FakeResponse, BaseException, Callable[[], Awaitable[FakeResponse]]]


class FakeRequest:
    """Awaitable and async context manager, like aiohttp's request context."""

    def __init__(self, session: "FakeSession", url: str) -> None:
        self._session = session
        self._url = url
        self._response: Optional[FakeResponse] = None

    async def _resolve(self) -> FakeResponse:
        route = self._session.routes.get(self._url)
        if route is None:
            raise aiohttp.ClientConnectionError(f"No route for {self._url}")
        if isinstance(route, BaseException):
            raise route
        if callable(route):
            return await route()
        return route

    def __await__(self):
        return self._resolve().__await__()

    async def __aenter__(self) -> FakeResponse:
        self._response = await self._resolve()
        return self._response

    async def __aexit__(self, *exc: object) -> None:
        if self._response is not None:
            self._response.release()


class FakeSession:
    """Minimal aiohttp.ClientSession replacement keyed by exact URL."""

    def __init__(self) -> None:
        self.routes: Dict[str, Route] = {}
        self.requests: List[str] = []

    def get(self, url: str) -> FakeRequest:
        self.requests.append(url)
        return FakeRequest(self, url)

    def add_json(self, url: str, data: Any, status: int = 200,
                 content_type: str = "application/json") -> None:
        self.routes[url] = FakeResponse(url, json.dumps(data), status, content_type)

    def add_html(self, url: str, html: str, status: int = 200) -> None:
        self.routes[url] = FakeResponse(url, html, status)

    def add_bytes(self, url: str, body: bytes, status: int = 200) -> None:
        self.routes[url] = FakeResponse(url, body, status)

    def add_error(self, url: str, error: BaseException) -> None:
        self.routes[url] = error

    def add_handler(self, url: str, handler: Callable[[], Awaitable[FakeResponse]]) -> None:
        self.routes[url] = handler


@pytest.fixture
def fake_session() -> FakeSession:
    """Return an empty fake HTTP session."""
    return FakeSession()


@pytest.fixture
def provider(fake_session: FakeSession) -> ITunesArtistImageProvider:
    """Return a provider wired to the fake session."""
    return ITunesArtistImageProvider(fake_session)  # type: ignore[arg-type]


@pytest.fixture
def artist() -> Item:
    """Return a music artist item."""
    return Item(name="Daft Punk", kind=ItemKind.MUSIC_ARTIST)

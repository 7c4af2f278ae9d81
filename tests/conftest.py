from __future__ import annotations

import io

import pytest
import requests
from PIL import Image

from pixel_dither.infrastructure.network import ImageFetcher


class FakeResponse:
    def __init__(self, content: bytes = b"", status_code: int = 200, headers=None) -> None:
        self.content = content
        self.status_code = status_code
        self.headers = headers or {}
        self.closed = False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def iter_content(self, chunk_size: int = 1):
        for start in range(0, len(self.content), chunk_size):
            yield self.content[start : start + chunk_size]

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """Stand-in for ``requests.Session`` returning a canned outcome."""

    def __init__(self, outcome) -> None:
        self.outcome = outcome
        self.headers: dict = {}
        self.calls: list = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def image_bytes(img: Image.Image, fmt: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    img.save(buffer, fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes() -> bytes:
    img = Image.new("RGB", (120, 60))
    img.putdata([((x * 2) % 256, (y * 4) % 256, (x + y) % 256) for y in range(60) for x in range(120)])
    return image_bytes(img)


@pytest.fixture
def make_fetcher():
    """Return a factory building an ``ImageFetcher`` around a ``FakeSession``."""

    def factory(outcome, **kwargs):
        session = FakeSession(outcome)
        fetcher = ImageFetcher(session_factory=lambda: session, **kwargs)
        return fetcher, session

    return factory

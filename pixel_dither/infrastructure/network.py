from __future__ import annotations

import io
import logging
import time
from typing import Callable

import requests
from PIL import Image, UnidentifiedImageError

from ..config import APP_VERSION, SETTINGS, DitherSettings
from ..errors import DecodeError, FetchError

log = logging.getLogger(__name__)

SessionFactory = Callable[[], requests.Session]
Clock = Callable[[], float]

_CHUNK_SIZE = 64 * 1024


def _read_limited(response: requests.Response, limit: int, deadline: float, clock: Clock) -> bytes:
    """Read the body, giving up past ``limit`` bytes or once ``clock()`` passes ``deadline``."""

    declared = response.headers.get("Content-Length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise FetchError(f"source declares {declared} bytes, limit is {limit}")

    buffer = bytearray()
    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
        buffer.extend(chunk)
        if len(buffer) > limit:
            raise FetchError(f"source exceeds {limit} bytes")
        if clock() > deadline:
            raise FetchError("source body took longer than the fetch timeout")
    return bytes(buffer)


def decode_image(data: bytes) -> Image.Image:
    """Decode ``data`` into an RGBA image, raising ``DecodeError`` on failure."""

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            return img.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as exc:
        raise DecodeError(f"unsupported or corrupt image: {exc}") from exc


class ImageFetcher:
    def __init__(
        self,
        session_factory: SessionFactory | None = None,
        settings: DitherSettings = SETTINGS,
        clock: Clock = time.monotonic,
    ) -> None:
        self._session_factory = session_factory or requests.Session
        self._settings = settings
        self._clock = clock
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        session = self._session_factory()
        session.headers.update({"User-Agent": f"pixel-dither/{APP_VERSION}"})
        return session

    def fetch_bytes(self, url: str) -> bytes:
        """Download ``url`` in a single attempt."""

        deadline = self._clock() + self._settings.timeout
        try:
            response = self._session.get(url, timeout=self._settings.timeout, stream=True)
        except requests.RequestException as exc:
            raise FetchError(f"could not reach {url}: {exc}") from exc

        try:
            response.raise_for_status()
            if not 200 <= response.status_code < 300:
                raise FetchError(f"fetching {url} returned HTTP {response.status_code}")
            data = _read_limited(
                response, self._settings.max_source_bytes, deadline, self._clock
            )
        except requests.RequestException as exc:
            raise FetchError(f"fetching {url} failed: {exc}") from exc
        finally:
            response.close()

        log.debug("Fetched %d bytes from %s", len(data), url)
        return data

    def fetch_image(self, url: str) -> Image.Image:
        return decode_image(self.fetch_bytes(url))


FETCHER = ImageFetcher()

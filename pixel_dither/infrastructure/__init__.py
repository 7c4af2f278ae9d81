"""Infrastructure helpers for fetching sources and sending responses."""

from .network import FETCHER, ImageFetcher, decode_image
from .responses import send_png

__all__ = [
    "FETCHER",
    "ImageFetcher",
    "decode_image",
    "send_png",
]

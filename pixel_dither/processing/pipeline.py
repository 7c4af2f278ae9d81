from __future__ import annotations

import logging
from dataclasses import dataclass

from PIL import Image

from ..config import SETTINGS, DitherSettings
from .dither import floyd_steinberg_565
from .encode import encode_png
from .resize import downscale, upscale_nearest
from .tone import posterize, to_grayscale

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineParams:
    internal_width: int = 54
    scale_factor: int = 3
    posterize_levels: int = 9
    grayscale: bool = False

    @classmethod
    def from_settings(cls, settings: DitherSettings = SETTINGS) -> "PipelineParams":
        return cls(
            internal_width=settings.internal_width,
            scale_factor=settings.scale_factor,
            posterize_levels=settings.posterize_levels,
            grayscale=settings.grayscale,
        )


def dither_image(src: Image.Image, params: PipelineParams) -> Image.Image:
    """Shrink, posterize, dither and re-enlarge ``src`` into blocky pixel art."""

    img = downscale(src, params.internal_width)
    if params.grayscale:
        img = to_grayscale(img)
    img = posterize(img, params.posterize_levels)
    img = floyd_steinberg_565(img)
    out = upscale_nearest(img, params.scale_factor)
    log.debug("Dithered %sx%s source into %sx%s", *src.size, *out.size)
    return out


def render_png(src: Image.Image, params: PipelineParams) -> bytes:
    return encode_png(dither_image(src, params))

from __future__ import annotations

from typing import List

from PIL import Image

from ..errors import InvalidParameterError

_ALPHA_IDENTITY = list(range(256))


def level_values(levels: int) -> List[int]:
    """Evenly spaced channel values for ``levels`` tones, from 0 to 255."""

    return [int(index * 255 / (levels - 1) + 0.5) for index in range(levels)]


def posterize_lut(levels: int) -> List[int]:
    if levels < 2:
        raise InvalidParameterError(f"posterize levels must be >= 2, got {levels}")
    levels = min(levels, 256)
    values = level_values(levels)
    return [values[int(value * (levels - 1) / 255 + 0.5)] for value in range(256)]


def _ensure_rgba(img: Image.Image) -> Image.Image:
    return img if img.mode == "RGBA" else img.convert("RGBA")


def to_grayscale(img: Image.Image) -> Image.Image:
    src = _ensure_rgba(img)
    alpha = src.getchannel("A")
    luma = src.convert("L")
    return Image.merge("RGBA", (luma, luma, luma, alpha))


def posterize(img: Image.Image, levels: int) -> Image.Image:
    """Snap every colour channel to the nearest of ``levels`` tones.

    Alpha passes through unchanged. Applying the same level count twice gives
    the same result as applying it once.
    """

    lut = posterize_lut(levels)
    return _ensure_rgba(img).point(lut * 3 + _ALPHA_IDENTITY)

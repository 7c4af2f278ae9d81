from __future__ import annotations

from typing import Tuple

from PIL import Image

from ..errors import InvalidParameterError


def target_size(size: Tuple[int, int], width: int) -> Tuple[int, int]:
    """Return ``(width, height)`` preserving the aspect ratio of ``size``."""

    if width < 1:
        raise InvalidParameterError(f"target width must be >= 1, got {width}")
    src_width, src_height = size
    height = int(src_height * width / src_width + 0.5)
    return width, max(1, height)


def downscale(img: Image.Image, width: int) -> Image.Image:
    return img.resize(target_size(img.size, width), Image.Resampling.BILINEAR)


def upscale_nearest(img: Image.Image, factor: int) -> Image.Image:
    """Enlarge ``img`` by an integer ``factor``, replicating every pixel into a block."""

    if factor < 1:
        raise InvalidParameterError(f"scale factor must be >= 1, got {factor}")
    if factor == 1:
        return img.copy()
    width, height = img.size
    return img.resize((width * factor, height * factor), Image.Resampling.NEAREST)

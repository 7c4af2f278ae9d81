from __future__ import annotations

import io

from PIL import Image

from ..errors import EncodeError

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
PNG_MODES = ("L", "LA", "RGB", "RGBA")


def encode_png(img: Image.Image) -> bytes:
    if img.mode not in PNG_MODES:
        raise EncodeError(f"cannot encode {img.mode} raster as 8-bit PNG")
    buffer = io.BytesIO()
    try:
        img.save(buffer, "PNG", optimize=True)
    except (OSError, ValueError) as exc:
        raise EncodeError(f"PNG encoding failed: {exc}") from exc
    return buffer.getvalue()

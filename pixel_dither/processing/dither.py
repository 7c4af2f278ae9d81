from __future__ import annotations

from bisect import bisect_left
from typing import List, Tuple

from PIL import Image

# Bits per channel of the reduced colour space: 5 red, 6 green, 5 blue.
RGB565_BITS: Tuple[int, int, int] = (5, 6, 5)

# (dx, dy, weight) in sixteenths, relative to the pixel being quantized.
FLOYD_STEINBERG_KERNEL: Tuple[Tuple[int, int, int], ...] = (
    (1, 0, 7),
    (-1, 1, 3),
    (0, 1, 5),
    (1, 1, 1),
)


def channel_levels(bits: int) -> List[int]:
    """Return the 8-bit values representable with ``bits`` bits per channel."""

    top = (1 << bits) - 1
    return [int(index * 255 / top + 0.5) for index in range(top + 1)]


_LEVELS = {bits: channel_levels(bits) for bits in set(RGB565_BITS)}


def quantize_channel(value: float, bits: int) -> int:
    """Return the representable level closest to ``value``; ties go to the lower one."""

    levels = _LEVELS.get(bits) or channel_levels(bits)
    index = bisect_left(levels, value)
    if index == 0:
        return levels[0]
    if index == len(levels):
        return levels[-1]
    lower, upper = levels[index - 1], levels[index]
    return lower if value - lower <= upper - value else upper


def _clamp(value: float) -> float:
    return 0.0 if value < 0.0 else 255.0 if value > 255.0 else value


def floyd_steinberg_565(img: Image.Image) -> Image.Image:
    """Error-diffuse ``img`` into the 5-6-5 colour space.

    Pixels are visited left to right, top to bottom. The quantization error
    of each pixel is pushed to its unvisited neighbours with the classic
    Floyd-Steinberg weights; neighbours outside the image are skipped.
    Alpha is carried over untouched. The input image is not modified.
    """

    src = img.convert("RGBA")
    width, height = src.size
    src_pixels = src.load()

    work: List[List[List[float]]] = [
        [list(src_pixels[x, y][:3]) for x in range(width)] for y in range(height)
    ]

    out = Image.new("RGBA", (width, height))
    out_pixels = out.load()

    for y in range(height):
        row = work[y]
        for x in range(width):
            old = row[x]
            new = tuple(quantize_channel(old[c], RGB565_BITS[c]) for c in range(3))
            out_pixels[x, y] = new + (src_pixels[x, y][3],)
            error = (old[0] - new[0], old[1] - new[1], old[2] - new[2])
            if error == (0, 0, 0):
                continue
            for dx, dy, weight in FLOYD_STEINBERG_KERNEL:
                nx, ny = x + dx, y + dy
                if nx < 0 or nx >= width or ny >= height:
                    continue
                target = work[ny][nx]
                factor = weight / 16.0
                for c in range(3):
                    target[c] = _clamp(target[c] + error[c] * factor)

    return out

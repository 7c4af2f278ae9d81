"""Image processing stages for the dither service."""

from .dither import channel_levels, floyd_steinberg_565, quantize_channel
from .encode import PNG_SIGNATURE, encode_png
from .pipeline import PipelineParams, dither_image, render_png
from .resize import downscale, target_size, upscale_nearest
from .tone import posterize, to_grayscale

__all__ = [
    "channel_levels",
    "floyd_steinberg_565",
    "quantize_channel",
    "PNG_SIGNATURE",
    "encode_png",
    "PipelineParams",
    "dither_image",
    "render_png",
    "downscale",
    "target_size",
    "upscale_nearest",
    "posterize",
    "to_grayscale",
]

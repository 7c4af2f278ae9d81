"""Pixel-art dither service: Flask app plus its fetch and image-processing stages."""

from .config import APP_VERSION
from .errors import DitherServiceError, InvalidInputError, PipelineError
from .processing.pipeline import PipelineParams, dither_image, render_png
from .app import app, create_app

__version__ = APP_VERSION

__all__ = [
    "APP_VERSION",
    "__version__",
    "DitherServiceError",
    "InvalidInputError",
    "PipelineError",
    "PipelineParams",
    "app",
    "create_app",
    "dither_image",
    "render_png",
]

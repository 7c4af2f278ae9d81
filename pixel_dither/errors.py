"""Exception types raised by the dither service."""


class DitherServiceError(Exception):
    """Base class for every error the service raises on purpose."""


class InvalidInputError(DitherServiceError):
    """The incoming request is missing a usable ``url`` parameter."""


class PipelineError(DitherServiceError):
    """Base class for failures while producing the dithered image."""


class FetchError(PipelineError):
    """The source image could not be downloaded."""


class DecodeError(PipelineError):
    """The downloaded bytes are not a decodable image."""


class InvalidParameterError(PipelineError, ValueError):
    """A pipeline stage received an out-of-range parameter."""


class EncodeError(PipelineError):
    """The final raster could not be written as PNG."""

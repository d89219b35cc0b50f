class ConversionError(Exception):
    """A conversion attempt failed and produced no output."""


class InvalidDimensions(ConversionError):
    """The image has zero width or height."""


class PixelAccessDenied(ConversionError):
    """Pixel data is missing or could not be read from the source."""


class ContextUnavailable(ConversionError):
    """No RGBA surface could be obtained to read pixels from."""

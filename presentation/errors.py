"""
presentation/errors.py -- Error kinds raised while rendering a deck

Only SurfaceCreationError is fatal to a run. The others are raised for a
single slide (or for the output directory) and are reported by the
exporter without stopping the remaining slides.
"""


class PresentationError(Exception):
    """Base class for all rendering errors."""


class SurfaceCreationError(PresentationError):
    """The raster surface for a canvas could not be allocated."""


class ImageLoadError(PresentationError):
    """A source image for an image slide is missing or undecodable."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"Failed to load image {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ExportIOError(PresentationError):
    """A rendered canvas could not be written to disk."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"Failed to write {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DirectoryCreationError(PresentationError):
    """The output directory could not be created."""

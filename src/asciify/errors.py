class AsciifyError(Exception):
    """Base class for errors raised by the conversion pipeline."""


class PreconditionError(AsciifyError, ValueError):
    """An argument makes the requested conversion impossible (bad block size, scale or dimensions)."""


class NotInitializedError(AsciifyError, RuntimeError):
    """A result was requested before the conversion inputs were supplied."""


class ImageTooLargeError(AsciifyError, MemoryError):
    """The requested raster cannot be allocated."""

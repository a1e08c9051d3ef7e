class InksetError(Exception):
    """Base exception for inkset."""

    pass


class InvalidBoundingBoxError(InksetError, ValueError):
    """Raised when a bounding box is built with inverted bounds."""

    pass


class MetadataError(InksetError, TypeError):
    """Raised when metadata holds a value that is not JSON."""

    pass


class BuilderConsumedError(InksetError, RuntimeError):
    """Raised when a StrokeBuilder is used after build()."""

    pass


class DegenerateSketchError(InksetError, ValueError):
    """Raised when a sketch cannot be normalized because an extent is zero."""

    pass


class DecodeError(InksetError, ValueError):
    """Raised when JSON cannot be decoded into a stroke or sketch."""

    def __init__(self, message: str, *, field: str | None = None, index: int | None = None):
        super().__init__(message)
        self.field = field
        self.index = index


class InvalidTimestampError(InksetError, ValueError):
    """Raised when a stroke timestamp is not an unsigned 64-bit integer."""

    pass

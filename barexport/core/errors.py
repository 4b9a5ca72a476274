"""Typed errors for the bar exporter."""


class ExportError(Exception):
    """Base class for exporter errors."""


class IOFailure(ExportError):
    """Raised when the output sink cannot be opened, written or flushed."""

"""Pure core contracts for the bar exporter."""

from barexport.core.errors import ExportError, IOFailure
from barexport.core.ports import BarSequence, RecordSink
from barexport.core.types import BEFORE_ALL_TIME, HEADER, Bar, format_record

__all__ = [
    "ExportError",
    "IOFailure",
    "BarSequence",
    "RecordSink",
    "Bar",
    "BEFORE_ALL_TIME",
    "HEADER",
    "format_record",
]

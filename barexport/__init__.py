"""Incremental OHLCV bar export to CSV."""

from barexport.core.errors import ExportError, IOFailure
from barexport.core.types import HEADER, Bar
from barexport.exporter import BarExporter
from barexport.sink import CsvFileSink

__all__ = ["Bar", "BarExporter", "CsvFileSink", "ExportError", "HEADER", "IOFailure"]

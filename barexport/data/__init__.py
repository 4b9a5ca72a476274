"""In-process bar sequences and stored bar input."""

from barexport.data.parquet_source import load_bars
from barexport.data.sequence import InMemoryBarSequence

__all__ = ["InMemoryBarSequence", "load_bars"]

from __future__ import annotations

import pytest

from bar_fakes import MemorySink


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()

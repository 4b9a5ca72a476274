from __future__ import annotations

import pytest

from barexport.data.sequence import InMemoryBarSequence

from bar_fakes import make_bar


def test_sequence_exposes_host_contract() -> None:
    bar = make_bar(2024, 1, 1, price="1.5", volume=3)
    sequence = InMemoryBarSequence([bar])

    assert len(sequence) == 1
    assert sequence.open_time_at(0) == bar.open_time
    assert sequence.ohlcv_at(0) == bar.ohlcv


def test_sequence_rejects_non_increasing_open_time() -> None:
    sequence = InMemoryBarSequence([make_bar(2024, 1, 1, 1)])

    with pytest.raises(ValueError, match="not after"):
        sequence.append(make_bar(2024, 1, 1, 1))
    with pytest.raises(ValueError):
        sequence.append(make_bar(2024, 1, 1, 0))
    assert len(sequence) == 1

from __future__ import annotations

from typing import List

import pytest

from spgen.sources import RandomSource


class FixedSource(RandomSource):
    """Replays a fixed list of 32-bit values, big-endian encoded."""

    name = "fixed"

    def __init__(self, values: List[int]) -> None:
        self.values = list(values)

    def read_bytes(self, n: int) -> bytes:
        data = b"".join(v.to_bytes(4, "big") for v in self.values)
        return data[:n]


@pytest.fixture
def fixed_source():
    return FixedSource

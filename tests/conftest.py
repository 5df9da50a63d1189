from __future__ import annotations

from typing import Callable

import pytest


class FixedRandom:
    """Deterministic stand-in for the CSPRNG: hands out queued byte strings in order."""

    def __init__(self, *chunks: bytes) -> None:
        self._chunks = list(chunks)
        self.requests: list[int] = []

    def token_bytes(self, num_bytes: int) -> bytes:
        self.requests.append(num_bytes)
        return self._chunks.pop(0)


@pytest.fixture
def fixed_random() -> Callable[[bytes, int], FixedRandom]:
    def make(key: bytes = bytes(range(32)), selector: int = 0) -> FixedRandom:
        return FixedRandom(key, bytes([selector]))

    return make

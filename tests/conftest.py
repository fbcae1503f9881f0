"""Shared fixtures and helpers for the probkit test suite."""

from __future__ import annotations

from typing import List

import pytest

from probkit.core.source import NumpySource, Source


class ScriptedSource(Source):
    """Source replaying a fixed list of uniforms; raises when exhausted."""

    def __init__(self, values: List[float]) -> None:
        self.values = list(values)
        self.consumed = 0

    def read_f64(self) -> float:
        value = self.values[self.consumed]
        self.consumed += 1
        return value

    def read_u64(self) -> int:
        return int(self.read_f64() * 2**64)


@pytest.fixture
def source() -> NumpySource:
    return NumpySource(seed=20240917)


@pytest.fixture
def scripted():
    return ScriptedSource

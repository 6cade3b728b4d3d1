"""Shared fixtures for hardware checker tests."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable

import pytest


class CountingHasher:
    """Hash primitive that records every call instead of hashing."""

    description = "fake$m=1,t=1"

    def __init__(self) -> None:
        self.calls: list[tuple[bytes, int]] = []

    def hash(self, password: bytes, parallelism: int) -> str:
        self.calls.append((password, parallelism))
        return f"$fake$p={parallelism}${password.hex()}"


@pytest.fixture()
def hasher() -> CountingHasher:
    """A fresh counting hasher."""
    return CountingHasher()


@pytest.fixture()
def fake_clock(monkeypatch: pytest.MonkeyPatch) -> Callable[[Iterable[float]], None]:
    """Install a ``perf_counter`` returning the given ticks, then the last one forever."""

    def install(ticks: Iterable[float]) -> None:
        ticks = list(ticks)
        values = itertools.chain(ticks, itertools.repeat(ticks[-1]))
        monkeypatch.setattr("hardware_checker.checker.time.perf_counter", lambda: next(values))

    return install

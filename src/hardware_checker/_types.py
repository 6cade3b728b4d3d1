"""Shared dataclasses and protocols for the hardware checker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class HashPrimitive(Protocol):
    """Structural type for the hash function being timed.

    The benchmark only needs a human-readable description of the
    configuration and a call that turns a password plus a lane count into
    an encoded hash.  Anything satisfying these two members can be timed.
    """

    description: str

    def hash(self, password: bytes, parallelism: int) -> str: ...


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing of one benchmark phase."""

    parallelism: int
    iterations: int
    elapsed: float

    @property
    def rate(self) -> float:
        """Hashes per second, infinite when no time was measured."""
        if self.elapsed == 0:
            return float("inf")
        return self.iterations / self.elapsed

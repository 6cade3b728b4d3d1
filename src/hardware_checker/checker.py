"""Single-core and multi-core Argon2id throughput benchmark.

Both phases hash the same fixed number of random passwords with the same
memory and time cost.  Only the Argon2 lane count changes: 1 for the first
phase, the number of available processors for the second.  Iterations run
strictly one after another; the multi-core phase relies on Argon2's own
lanes rather than on concurrent calls.
"""

from __future__ import annotations

import logging
import os
import time
import uuid

from hardware_checker import colours
from hardware_checker._constants import N_ITERATIONS
from hardware_checker._hashing import Argon2Hasher
from hardware_checker._types import BenchmarkResult, HashPrimitive

logger = logging.getLogger(__name__)


def available_cpus() -> int:
    """Number of processors on the host, or 1 if it cannot be determined."""
    return os.cpu_count() or 1


def calc_hash(parallelism: int, hasher: HashPrimitive | None = None) -> str:
    """Hash a fresh random UUID with ``parallelism`` lanes."""
    if hasher is None:
        hasher = Argon2Hasher()
    password = str(uuid.uuid4()).encode("utf-8")
    return hasher.hash(password, parallelism)


def check_cpu(
    parallelism: int,
    hasher: HashPrimitive | None = None,
    iterations: int = N_ITERATIONS,
) -> BenchmarkResult:
    """Time ``iterations`` sequential hashes and print elapsed time and rate.

    Parameters
    ----------
    parallelism : int
        Lane count passed into every hash call.
    hasher : HashPrimitive or None
        Hash function to time.  Defaults to :class:`Argon2Hasher`.
    iterations : int
        Number of hashes to compute.

    Returns
    -------
    BenchmarkResult
        Elapsed seconds and derived throughput.
    """
    if hasher is None:
        hasher = Argon2Hasher()
    colours.styles().println(
        "Hash algorithm: %s,p=%d; N = %d",
        hasher.description,
        parallelism,
        iterations,
    )
    logger.debug("check_cpu: parallelism=%d iterations=%d", parallelism, iterations)

    start = time.perf_counter()
    for _ in range(iterations):
        calc_hash(parallelism, hasher)
    result = BenchmarkResult(parallelism, iterations, time.perf_counter() - start)
    logger.debug("check_cpu: %.3fs", result.elapsed)

    colours.styles().println("Took %.2f sec", result.elapsed)
    colours.styles(colours.GREEN).println("Result: %.2f hashes/s", result.rate)
    return result


def run(hasher: HashPrimitive | None = None, cpu_count: int | None = None) -> None:
    """Run the single-core phase, then the all-cores phase."""
    if hasher is None:
        hasher = Argon2Hasher()

    colours.styles(colours.CYAN).println("\nChecking CPU...")
    check_cpu(1, hasher)

    n_cpus = cpu_count or available_cpus()
    colours.styles(colours.CYAN).println("\nChecking CPU over %d cores...", n_cpus)
    check_cpu(n_cpus, hasher)

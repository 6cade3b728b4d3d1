"""Click entry point for the hardware checker."""

from __future__ import annotations

import sys

import click
from argon2.exceptions import HashingError

from hardware_checker._console import err_console
from hardware_checker.checker import run


@click.command()
def main() -> None:
    """Benchmark single-core and multi-core Argon2id hashing throughput."""
    try:
        run()
    except HashingError as exc:
        err_console.print(f"ERROR: hashing failed: {exc}")
        sys.exit(1)

"""Shared rich console for fatal CLI diagnostics."""

from __future__ import annotations

from rich.console import Console

err_console = Console(stderr=True, highlight=False, style="bold red")

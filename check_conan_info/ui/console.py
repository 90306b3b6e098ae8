"""Shared Rich console.

Diagnostics go to stderr via ``err_console``; stdout carries only records.
"""

from __future__ import annotations

from rich.console import Console

err_console = Console(stderr=True)

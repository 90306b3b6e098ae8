"""Terminal chrome. Records go to stdout; diagnostics go to stderr."""

from __future__ import annotations

from check_conan_info.ui.console import err_console

__all__ = ["err_console"]

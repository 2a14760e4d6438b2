"""Console output for gctx.

- Stdout: status lines for the user
- Stderr: errors and debug lines
"""

from __future__ import annotations

import sys

from ..utils.env import is_debug_mode


def emit_status(message: str) -> None:
    """Print a status line to stdout."""
    print(message)


def emit_error(message: str) -> None:
    """Print an error line to stderr."""
    print(f"Error: {message}", file=sys.stderr)


def log_debug(message: str) -> None:
    """Log debug message to stderr.
    
    Only outputs if GCTX_DEBUG is set.
    """
    if is_debug_mode():
        print(f"[gctx] {message}", file=sys.stderr)

"""Environment utilities for gctx."""

from __future__ import annotations

import os
from pathlib import Path


def is_debug_mode() -> bool:
    """Check if debug mode is enabled.
    
    Returns:
        True if GCTX_DEBUG is set to a truthy value
    """
    val = os.environ.get("GCTX_DEBUG", "").lower()
    return val in ("1", "true", "yes", "on")


def get_home_dir() -> Path:
    """Get user home directory.
    
    Returns:
        Path to home directory
    """
    return Path.home()


def get_default_store_dir() -> Path:
    """Get default snapshot store directory (~/.gctx).
    
    Returns:
        Path to the store directory
    """
    return get_home_dir() / ".gctx"


def get_default_gitconfig() -> Path:
    """Get the user's git config file (~/.gitconfig)."""
    return get_home_dir() / ".gitconfig"


def get_global_config_path() -> Path:
    """Get the gctx settings file (~/.config/gctx/config.json).

    Kept outside the store directory so the store only ever holds snapshots.
    """
    return get_home_dir() / ".config" / "gctx" / "config.json"

"""Utility modules for gctx."""

from .fs import atomic_copy, ensure_dir, file_digest, file_exists, safe_json_load
from .env import (
    get_default_gitconfig,
    get_default_store_dir,
    get_global_config_path,
    get_home_dir,
    is_debug_mode,
)

__all__ = [
    "atomic_copy",
    "ensure_dir",
    "file_digest",
    "file_exists",
    "safe_json_load",
    "get_default_gitconfig",
    "get_default_store_dir",
    "get_global_config_path",
    "get_home_dir",
    "is_debug_mode",
]

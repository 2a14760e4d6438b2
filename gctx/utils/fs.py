"""File system utilities for gctx.

Provides atomic copies, directory creation, and safe file operations.
"""

from __future__ import annotations

import hashlib
import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any


CHUNK_SIZE = 64 * 1024


def atomic_copy(src: Path | str, dst: Path | str) -> Path:
    """Copy a file atomically using tempfile + rename pattern.
    
    The destination either keeps its previous content or receives the
    full content of ``src``; a partially written file is never visible.
    
    Args:
        src: Source file path
        dst: Target file path
        
    Returns:
        Path object for the destination
    """
    src_path = Path(src)
    dst_path = Path(dst)
    dst_path.parent.mkdir(parents=True, exist_ok=True)
    
    # Create temp file in same directory for atomic rename
    fd, tmp_path = tempfile.mkstemp(
        dir=dst_path.parent,
        prefix=f".{dst_path.name}.",
        suffix=".tmp"
    )
    
    try:
        with os.fdopen(fd, "wb") as out, open(src_path, "rb") as inp:
            shutil.copyfileobj(inp, out, CHUNK_SIZE)
        if dst_path.exists():
            # mkstemp creates 0600 files; keep the mode of the file being replaced
            shutil.copymode(dst_path, tmp_path)
        os.replace(tmp_path, dst_path)
    except Exception:
        # Clean up temp file on failure
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise
    
    return dst_path


def file_digest(file_path: Path | str) -> str:
    """Compute the lowercase hex MD5 of a file's content.
    
    Args:
        file_path: File to hash
        
    Returns:
        Hex digest string
    """
    md5 = hashlib.md5()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            md5.update(chunk)
    return md5.hexdigest()


def ensure_dir(dir_path: Path | str) -> Path:
    """Ensure directory exists, creating it if necessary.
    
    Args:
        dir_path: Directory path to create
        
    Returns:
        Path object for the directory
    """
    path = Path(dir_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def file_exists(file_path: Path | str) -> bool:
    """Check if a regular file exists at the path."""
    return Path(file_path).is_file()


def safe_json_load(file_path: Path | str, default: Any = None) -> Any:
    """Safely load JSON file with fallback.
    
    Args:
        file_path: Path to JSON file
        default: Default value if file doesn't exist or is invalid
        
    Returns:
        Parsed JSON or default value
    """
    try:
        with open(file_path) as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError):
        return default if default is not None else {}

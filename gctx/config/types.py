"""Configuration schemas for gctx."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..utils.env import get_default_gitconfig, get_default_store_dir


def _coerce_path(val: object, default: Path) -> Path:
    if isinstance(val, str) and val.strip():
        return Path(val.strip()).expanduser()
    if isinstance(val, Path):
        return val.expanduser()
    return default


@dataclass
class GctxConfig:
    """Main gctx configuration."""
    store_dir: Path = field(default_factory=get_default_store_dir)
    gitconfig: Path = field(default_factory=get_default_gitconfig)
    
    @classmethod
    def from_dict(cls, data: dict) -> GctxConfig:
        """Create GctxConfig from dictionary.

        Unknown keys are ignored; missing or non-string values fall back
        to the defaults under the home directory.
        """
        defaults = cls()
        return cls(
            store_dir=_coerce_path(data.get("storeDir"), defaults.store_dir),
            gitconfig=_coerce_path(data.get("gitconfig"), defaults.gitconfig),
        )
    
    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "storeDir": str(self.store_dir),
            "gitconfig": str(self.gitconfig),
        }

"""Configuration loader for gctx.

Handles loading and merging configuration from multiple sources.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

from ..utils.env import get_global_config_path
from ..utils.fs import safe_json_load
from .types import GctxConfig


ENV_STORE_DIR = "GCTX_STORE_DIR"
ENV_GITCONFIG = "GCTX_GITCONFIG"

_ENV_KEYS = {
    ENV_STORE_DIR: "storeDir",
    ENV_GITCONFIG: "gitconfig",
}


class ConfigLoader:
    """Loads and manages gctx configuration."""
    
    def __init__(
        self,
        config_path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """Initialize config loader.
        
        Args:
            config_path: Settings file to read (defaults to ~/.config/gctx/config.json)
            environ: Environment mapping (defaults to os.environ)
        """
        self.config_path = Path(config_path) if config_path else get_global_config_path()
        self.environ = environ if environ is not None else os.environ
        self._config: GctxConfig | None = None
    
    @property
    def config(self) -> GctxConfig:
        """Get loaded configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config
    
    def load(self) -> GctxConfig:
        """Load configuration from all sources.
        
        Priority (highest to lowest):
        1. Environment (GCTX_STORE_DIR, GCTX_GITCONFIG)
        2. Settings file (~/.config/gctx/config.json)
        3. Default values
        
        Command line options are applied on top by the CLI.
        
        Returns:
            Merged GctxConfig
        """
        merged: dict[str, Any] = {}
        
        if self.config_path.exists():
            file_data = safe_json_load(self.config_path, {})
            if isinstance(file_data, dict):
                merged.update(file_data)
        
        for env_key, config_key in _ENV_KEYS.items():
            val = self.environ.get(env_key)
            if isinstance(val, str) and val.strip():
                merged[config_key] = val
        
        return GctxConfig.from_dict(merged)

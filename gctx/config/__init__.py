"""Configuration management for gctx."""

from .types import GctxConfig
from .loader import ConfigLoader

__all__ = [
    "GctxConfig",
    "ConfigLoader",
]

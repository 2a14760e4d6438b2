"""Core modules for gctx."""

from .context_store import (
    AmbiguousContext,
    ContextKey,
    ContextNotFound,
    ContextResult,
    ContextStore,
    ContextStoreError,
    InvalidContextName,
    Outcome,
    Resolution,
    SourceNotFound,
    StoredSnapshot,
)

__all__ = [
    "AmbiguousContext",
    "ContextKey",
    "ContextNotFound",
    "ContextResult",
    "ContextStore",
    "ContextStoreError",
    "InvalidContextName",
    "Outcome",
    "Resolution",
    "SourceNotFound",
    "StoredSnapshot",
]

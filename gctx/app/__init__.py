"""Command line interface for gctx."""

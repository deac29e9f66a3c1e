"""Application services orchestrating domain and core capabilities."""

from .execution import run_sync

__all__ = ["run_sync"]

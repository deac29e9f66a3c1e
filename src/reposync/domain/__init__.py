"""Domain models and set logic."""

from .models import ORG_REPO_TYPES, USER_REPO_TYPES, SyncConfig, SyncResult
from .sets import contains, difference

__all__ = [
    "ORG_REPO_TYPES",
    "USER_REPO_TYPES",
    "SyncConfig",
    "SyncResult",
    "contains",
    "difference",
]

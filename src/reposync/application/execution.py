"""Application service for a reconciliation run."""

import time
from typing import Dict, Tuple, Union

from ..core.reconcile import sync
from ..core.task import Logger
from ..domain.models import SyncConfig
from ..errors import ReposyncError
from ..infra import logger as default_logger

RunSummary = Dict[str, Union[int, bool, Dict[str, str]]]


def run_sync(config: SyncConfig, logger: Logger = default_logger) -> Tuple[bool, RunSummary, str]:
    """Validate ``config`` and run a sync, returning (success, summary, error)."""
    try:
        config.validate()
        start_time = time.time()
        result = sync(config, logger=logger)
    except ReposyncError as exc:
        return False, {}, str(exc)

    summary: RunSummary = {
        "remote": result.remote_count,
        "local": result.local_count,
        "total": len(result.archived) + len(result.cloned) + len(result.failed),
        "archived": len(result.archived),
        "cloned": len(result.cloned),
        "fail": len(result.failed),
        "failed_reasons": dict(result.failed),
        "duration": int(time.time() - start_time),
        "dry_run": result.dry_run,
    }
    return True, summary, ""

"""Move a stale checkout out of the working directory."""

import os
from pathlib import Path
from typing import Union


def archive_repo(repo_name: str, workdir: Union[str, Path], archivedir: Union[str, Path]) -> Path:
    """Rename ``workdir/repo_name`` to ``archivedir/repo_name``; return the new path."""
    source = Path(workdir) / repo_name
    target = Path(archivedir) / repo_name
    os.rename(source, target)
    return target

"""List the checkouts already present in the working directory."""

from pathlib import Path
from typing import List, Union

HIDDEN_PREFIX = "."


def list_local_repos(workdir: Union[str, Path]) -> List[str]:
    """Names of the non-hidden subdirectories of ``workdir``, sorted.

    Symlinks are not checkouts, even when they point at a directory.

    An unreadable or missing directory yields an empty list: there is simply
    nothing checked out yet, and the run goes on to clone everything.
    """
    try:
        entries = list(Path(workdir).iterdir())
    except OSError:
        return []

    names = []
    for entry in entries:
        if entry.name.startswith(HIDDEN_PREFIX):
            continue
        try:
            if entry.is_symlink() or not entry.is_dir():
                continue
        except OSError:
            continue
        names.append(entry.name)
    return sorted(names)

"""Reconcile the working directory with the remote repository list.

One run:

1. list remote repos (fatal on error) and local checkouts (never fails);
2. plan ``archive = local - remote`` and ``clone = remote - local``;
3. stop with "nothing to do!" when both are empty;
4. create the archive directory (fatal on error);
5. archive and clone concurrently, one worker per repo, then wait for the
   archive group and the clone group.

Per-repo failures are logged by :class:`Task` and collected into the
returned :class:`SyncResult`; they never fail the run.
"""

import os
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, List, Optional, Sequence, Tuple

from ..domain.models import SyncConfig, SyncResult
from ..domain.sets import difference
from ..errors import SyncError
from ..infra import logger as default_logger
from ..infra.github_api import fetch_repo_names
from .archive import archive_repo
from .clone import clone_repo
from .local_repos import list_local_repos
from .task import Logger, Task

ARCHIVE_DIR_MODE = 0o755


def plan_actions(remote_repos: Sequence[str], local_repos: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Return (to_archive, to_clone) for the given remote and local names."""
    return difference(local_repos, remote_repos), difference(remote_repos, local_repos)


def _archive_action(config: SyncConfig, repo_name: str) -> Callable[[], None]:
    def action() -> None:
        if config.dry_run:
            return
        archive_repo(repo_name, config.workdir, config.archivedir)

    return action


def _clone_action(config: SyncConfig, repo_name: str) -> Callable[[], None]:
    def action() -> None:
        if config.dry_run:
            return
        clone_repo(config.account, repo_name, config.workdir)

    return action


def _start_group(
    executor: ThreadPoolExecutor,
    tasks: List[Tuple[str, Task]],
) -> List[Tuple[str, "Future[Optional[Exception]]"]]:
    return [(repo, executor.submit(task.run)) for repo, task in tasks]


def _wait_group(
    futures: List[Tuple[str, "Future[Optional[Exception]]"]],
) -> List[Tuple[str, Optional[Exception]]]:
    wait([future for _, future in futures])
    return [(repo, future.result()) for repo, future in futures]


def sync(config: SyncConfig, logger: Logger = default_logger) -> SyncResult:
    """Run one reconciliation.

    Raises:
        SyncError: the remote listing failed or the archive dir could not be created.
    """
    remote_repos: List[str] = []
    error = Task(
        lambda: remote_repos.extend(fetch_repo_names(config)),
        f"loading repos for {config.account_kind} {config.account}",
        logger,
    ).run()
    if error is not None:
        raise SyncError(f"cannot list repos for {config.account}: {error}") from error

    local_repos: List[str] = []
    Task(
        lambda: local_repos.extend(list_local_repos(config.workdir)),
        f"loading repos already cloned in {config.workdir}",
        logger,
    ).run()

    to_archive, to_clone = plan_actions(tuple(remote_repos), tuple(local_repos))
    result = SyncResult(
        remote_count=len(remote_repos),
        local_count=len(local_repos),
        dry_run=config.dry_run,
    )

    if not to_archive and not to_clone:
        logger.log_info("nothing to do!")
        return result

    if config.dry_run:
        logger.log_warning("dry run: no directory will be moved and nothing will be cloned")
    else:
        try:
            os.makedirs(config.archivedir, mode=ARCHIVE_DIR_MODE, exist_ok=True)
        except OSError as exc:
            raise SyncError(f"cannot create archive dir {config.archivedir}: {exc}") from exc

    # one task per planned entry, duplicates included
    archive_tasks = [
        (repo, Task(_archive_action(config, repo), f"archiving {repo}", logger))
        for repo in to_archive
    ]
    clone_tasks = [
        (repo, Task(_clone_action(config, repo), f"cloning {repo}", logger))
        for repo in to_clone
    ]

    # 每个仓库一个线程，不设上限；两组互不等待，各自有独立的完成屏障
    archivers = ThreadPoolExecutor(max_workers=max(len(archive_tasks), 1), thread_name_prefix="archive")
    cloners = ThreadPoolExecutor(max_workers=max(len(clone_tasks), 1), thread_name_prefix="clone")
    try:
        archive_futures = _start_group(archivers, archive_tasks)
        clone_futures = _start_group(cloners, clone_tasks)
        archive_outcomes = _wait_group(archive_futures)
        clone_outcomes = _wait_group(clone_futures)
    finally:
        archivers.shutdown(wait=True)
        cloners.shutdown(wait=True)

    for repo, outcome in archive_outcomes:
        if outcome is None:
            result.archived.append(repo)
        else:
            result.failed[repo] = str(outcome)
    for repo, outcome in clone_outcomes:
        if outcome is None:
            result.cloned.append(repo)
        else:
            result.failed[repo] = str(outcome)
    return result

# 仓库克隆模块：克隆单个仓库
#
# 主要功能：
#   - get_repo_url()：SSH 地址 git@github.com:<account>/<repo>
#   - clone_repo()：执行 git clone，失败时抛出 CloneError（附带完整输出）
#
# 不设超时、不重试：每个仓库只尝试一次。

import subprocess
from pathlib import Path
from typing import Union

from ..errors import CloneError


def get_repo_url(account: str, repo_name: str) -> str:
    return f"git@github.com:{account}/{repo_name}"


def clone_repo(account: str, repo_name: str, workdir: Union[str, Path]) -> Path:
    """Clone ``account/repo_name`` into ``workdir/repo_name``.

    Raises:
        CloneError: git exited non-zero; carries combined stdout+stderr.
    """
    target_path = Path(workdir) / repo_name
    git_cmd = ['git', 'clone', get_repo_url(account, repo_name), str(target_path)]

    result = subprocess.run(
        git_cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        stdin=subprocess.DEVNULL,
        text=True,
    )
    if result.returncode != 0:
        raise CloneError(result.returncode, result.stdout or "")
    return target_path

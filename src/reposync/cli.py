# reposync 命令行入口
#
# 执行流程：
#   1. 解析命令行参数（-version 直接输出版本并退出）
#   2. 组装并校验 SyncConfig（缺少必填项时立即退出，不做任何网络/文件操作）
#   3. 执行同步：拉取远程列表 → 扫描本地目录 → 并行归档/克隆
#   4. 输出统计报告
#
# 退出码：0 成功（个别仓库失败也算成功，见日志），1 致命错误

import sys
from dataclasses import replace
from typing import List, Optional

from . import __version__
from .application.execution import RunSummary, run_sync
from .domain.models import SyncConfig
from .errors import ConfigError
from .infra import logger
from .infra.args import parse_args
from .infra.auth import resolve_token


def build_config(args) -> SyncConfig:
    return SyncConfig(
        workdir=args.dir,
        archivedir=args.archivedir,
        token=args.token,
        user=args.user,
        org=args.org,
        user_repo_type=args.userrepotype,
        user_repo_forks=args.userrepoforks,
        org_repo_type=args.orgrepotype,
        dry_run=args.dryrun,
    )


def print_summary(summary: RunSummary) -> None:
    duration = int(summary["duration"])
    minutes, seconds = divmod(duration, 60)

    title = "sync finished (dry run)" if summary["dry_run"] else "sync finished"
    logger.log_info(f"========== {title} ==========")
    logger.log_info(f"remote repos: {summary['remote']}, local checkouts: {summary['local']}")
    logger.log_success(f"archived: {summary['archived']}")
    logger.log_success(f"cloned: {summary['cloned']}")
    if summary["fail"]:
        logger.log_error(f"failed: {summary['fail']}")
        for repo, reason in sorted(summary["failed_reasons"].items()):
            logger.log_error(f"  {repo}: {reason}")
    else:
        logger.log_info("failed: 0")
    logger.log_info(f"took {minutes}m {seconds}s")
    logger.log_info("=" * (len(title) + 22))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.version:
        print(__version__)
        return 0

    config = build_config(args)
    # 钥匙串只在其余参数都齐全之后才读取
    try:
        config.validate_targets()
    except ConfigError as exc:
        logger.log_error(str(exc))
        return 1

    token, source = resolve_token(config.token)
    if source == "keyring":
        logger.log_info("using GitHub token from the system keyring")
    config = replace(config, token=token)

    # run_sync 完成最终校验（缺少 token 时返回错误）
    success, summary, error = run_sync(config, logger=logger)
    if not success:
        logger.log_error(error)
        return 1

    if summary["total"]:
        print_summary(summary)
    return 0


if __name__ == '__main__':
    sys.exit(main())

# 命令行参数解析模块
#
# 兼容单横线长参数（-user、-dir ...）与双横线写法（--user、--dir ...）；
# 布尔参数支持 -dryrun、-dryrun=true、-userrepoforks=false。

import argparse
from typing import List, Optional

from .. import __version__
from ..domain.models import ORG_REPO_TYPES, USER_REPO_TYPES


def parse_bool(value: str) -> bool:
    """Parse a boolean flag value the way Go's flag package accepts them."""
    lowered = value.strip().lower()
    if lowered in ("1", "t", "true", "yes", "y"):
        return True
    if lowered in ("0", "f", "false", "no", "n"):
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reposync",
        description="Sync a folder of checkouts with the repos of a GitHub user or organization.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
examples:
  %(prog)s -org acme -dir ~/src/acme -archivedir ~/src/acme-archive -token $GITHUB_TOKEN
  %(prog)s -user octocat -userrepoforks=false -dir ~/src -archivedir ~/old -dryrun

Repositories missing locally are cloned over SSH (git@github.com:<account>/<repo>);
directories with no matching repository are moved into -archivedir.
        """,
    )
    parser.add_argument(
        '-version', '--version',
        action='store_true',
        help='show version and exit',
    )
    parser.add_argument(
        '-user', '--user',
        default='',
        help='GitHub user to sync a folder with (this or -org is required)',
    )
    parser.add_argument(
        '-userrepotype', '--userrepotype',
        default='all',
        choices=USER_REPO_TYPES,
        help='type of repos to pull for the user (default: all)',
    )
    parser.add_argument(
        '-userrepoforks', '--userrepoforks',
        type=parse_bool,
        nargs='?',
        const=True,
        default=True,
        metavar='BOOL',
        help='include forks for the user (default: true)',
    )
    parser.add_argument(
        '-org', '--org',
        default='',
        help='GitHub organization to sync a folder with (this or -user is required)',
    )
    parser.add_argument(
        '-orgrepotype', '--orgrepotype',
        default='all',
        choices=ORG_REPO_TYPES,
        help='type of repos to pull for the org (default: all)',
    )
    parser.add_argument(
        '-dir', '--dir',
        default='',
        help='directory holding one folder per repo',
    )
    parser.add_argument(
        '-archivedir', '--archivedir',
        default='',
        help='directory receiving folders from -dir that no longer match a repo',
    )
    parser.add_argument(
        '-token', '--token',
        default='',
        help='GitHub token (falls back to the "reposync" entry in the system keyring)',
    )
    parser.add_argument(
        '-dryrun', '--dryrun',
        type=parse_bool,
        nargs='?',
        const=True,
        default=False,
        metavar='BOOL',
        help='print actions instead of performing them',
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """解析命令行参数"""
    return build_parser().parse_args(argv)

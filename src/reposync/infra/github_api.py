# GitHub API：拉取用户或组织的全部仓库名
#
# 主要功能：
#   - fetch_org_repo_names()：组织仓库（按 type 过滤）
#   - fetch_user_repo_names()：用户仓库（按 type 过滤，可排除 fork）
#   - fetch_repo_names()：按 SyncConfig 选择上面两者之一
#
# 分页：读取响应头 Link 中 rel="next" 的 page 参数，
# 没有下一页时为 NO_NEXT_PAGE，循环结束。任何一页失败都直接抛出 GitHubAPIError，不重试。

import json
import re
import urllib.error
import urllib.parse
import urllib.request
from typing import Dict, List, Optional, Tuple

from .. import __version__
from ..domain.models import SyncConfig
from ..errors import GitHubAPIError

API_ROOT = "https://api.github.com"
NO_NEXT_PAGE = 0
DEFAULT_TIMEOUT = 30

LINK_NEXT_PATTERN = re.compile(r'<([^>]+)>\s*;\s*rel="next"')


def _parse_next_page(link_header: Optional[str]) -> int:
    """Return the page number of the rel="next" link, or NO_NEXT_PAGE."""
    if not link_header:
        return NO_NEXT_PAGE
    match = LINK_NEXT_PATTERN.search(link_header)
    if not match:
        return NO_NEXT_PAGE
    query = urllib.parse.urlparse(match.group(1)).query
    pages = urllib.parse.parse_qs(query).get("page")
    if not pages:
        return NO_NEXT_PAGE
    try:
        return int(pages[0])
    except ValueError:
        return NO_NEXT_PAGE


def _build_headers(token: str) -> Dict[str, str]:
    return {
        "User-Agent": f"reposync/{__version__}",
        "Accept": "application/vnd.github+json",
        "Authorization": f"Bearer {token}",
    }


def _request_page(url: str, token: str, timeout: int = DEFAULT_TIMEOUT) -> Tuple[List[Dict], int]:
    """GET one page of repositories; return (repos, next_page)."""
    req = urllib.request.Request(url, headers=_build_headers(token))
    try:
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            body = resp.read().decode("utf-8")
            link_header = resp.headers.get("Link")
    except urllib.error.HTTPError as e:
        if e.code == 401:
            raise GitHubAPIError("GitHub API authentication failed (bad token?)", e.code) from e
        if e.code == 403:
            raise GitHubAPIError("GitHub API access forbidden (rate limit or token scope)", e.code) from e
        if e.code == 404:
            raise GitHubAPIError(f"GitHub account not found: {url}", e.code) from e
        raise GitHubAPIError(f"GitHub API request failed: HTTP {e.code}", e.code) from e
    except urllib.error.URLError as e:
        raise GitHubAPIError(f"cannot reach GitHub API: {e.reason}") from e

    try:
        data = json.loads(body)
    except ValueError as e:
        raise GitHubAPIError(f"cannot parse GitHub API response: {e}") from e

    if not isinstance(data, list):
        message = data.get("message") if isinstance(data, dict) else "unexpected payload"
        raise GitHubAPIError(f"GitHub API returned an error: {message}")

    return data, _parse_next_page(link_header)


def _page_url(path: str, repo_type: str, per_page: int, page: int) -> str:
    query = {"type": repo_type, "per_page": per_page}
    if page != NO_NEXT_PAGE:
        query["page"] = page
    return f"{API_ROOT}{path}?{urllib.parse.urlencode(query)}"


def _collect_names(
    path: str,
    token: str,
    repo_type: str,
    per_page: int,
    include_forks: bool = True,
) -> List[str]:
    names: List[str] = []
    page = NO_NEXT_PAGE
    while True:
        repos, next_page = _request_page(_page_url(path, repo_type, per_page, page), token)
        for repo in repos:
            name = repo.get("name")
            if not name:
                continue
            if not include_forks and repo.get("fork"):
                continue
            names.append(name)
        if next_page == NO_NEXT_PAGE:
            break
        page = next_page
    return names


def fetch_org_repo_names(org: str, token: str, repo_type: str = "all", per_page: int = 100) -> List[str]:
    return _collect_names(f"/orgs/{urllib.parse.quote(org)}/repos", token, repo_type, per_page)


def fetch_user_repo_names(
    user: str,
    token: str,
    repo_type: str = "all",
    include_forks: bool = True,
    per_page: int = 1000,
) -> List[str]:
    return _collect_names(
        f"/users/{urllib.parse.quote(user)}/repos",
        token,
        repo_type,
        per_page,
        include_forks=include_forks,
    )


def fetch_repo_names(config: SyncConfig) -> List[str]:
    """List repo names for whichever account ``config`` names."""
    if config.org:
        return fetch_org_repo_names(
            config.org,
            config.token,
            repo_type=config.org_repo_type,
            per_page=config.org_per_page,
        )
    return fetch_user_repo_names(
        config.user,
        config.token,
        repo_type=config.user_repo_type,
        include_forks=config.user_repo_forks,
        per_page=config.user_per_page,
    )

"""Domain data structures."""

from dataclasses import dataclass, field
from typing import Dict, List

from ..errors import ConfigError

USER_REPO_TYPES = ("all", "owner", "member")
ORG_REPO_TYPES = ("all", "public", "private", "forks", "sources", "member")

# GitHub caps per_page at 100; the user listing has always asked for more
# and the two are kept separately tunable.
ORG_PER_PAGE = 100
USER_PER_PAGE = 1000


@dataclass(frozen=True)
class SyncConfig:
    """Everything one reconciliation run needs to know."""

    workdir: str
    archivedir: str
    token: str
    user: str = ""
    org: str = ""
    user_repo_type: str = "all"
    user_repo_forks: bool = True
    org_repo_type: str = "all"
    dry_run: bool = False
    org_per_page: int = ORG_PER_PAGE
    user_per_page: int = USER_PER_PAGE

    @property
    def account(self) -> str:
        return self.org or self.user

    @property
    def account_kind(self) -> str:
        return "org" if self.org else "user"

    def validate(self) -> None:
        """Raise ConfigError for the first missing or invalid setting."""
        self.validate_targets()
        if not self.token:
            raise ConfigError("must provide token")

    def validate_targets(self) -> None:
        """Check everything except the token, which may still come from the keyring."""
        if not self.user and not self.org:
            raise ConfigError("must provide user or org")
        if self.user and self.org:
            raise ConfigError("must provide only one of user or org")
        if not self.workdir:
            raise ConfigError("must provide dir")
        if not self.archivedir:
            raise ConfigError("must provide archivedir")
        if self.user_repo_type not in USER_REPO_TYPES:
            raise ConfigError(
                f"invalid userrepotype {self.user_repo_type!r}, "
                f"expected one of: {', '.join(USER_REPO_TYPES)}"
            )
        if self.org_repo_type not in ORG_REPO_TYPES:
            raise ConfigError(
                f"invalid orgrepotype {self.org_repo_type!r}, "
                f"expected one of: {', '.join(ORG_REPO_TYPES)}"
            )


@dataclass
class SyncResult:
    """Outcome of a run; per-repo failures land in ``failed``."""

    remote_count: int = 0
    local_count: int = 0
    dry_run: bool = False
    archived: List[str] = field(default_factory=list)
    cloned: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

"""Exception types shared across reposync."""

from typing import Optional


class ReposyncError(Exception):
    """Base class for errors that are not bugs in reposync."""


class ConfigError(ReposyncError):
    """Missing or invalid startup configuration."""


class GitHubAPIError(ReposyncError):
    """A repository listing request failed."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class CloneError(ReposyncError):
    """`git clone` exited non-zero; keeps the combined output for diagnostics."""

    def __init__(self, returncode: int, output: str):
        super().__init__(f"exit status {returncode} from {output.strip()}")
        self.returncode = returncode
        self.output = output


class SyncError(ReposyncError):
    """A fatal failure before any per-repo task was started."""

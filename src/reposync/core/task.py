"""Run a unit of work, logging begin/finished/error around it."""

from typing import Any, Callable, Optional

from ..infra import logger as default_logger

# reposync.infra.logger, or any object with log_info/log_success/log_warning/log_error
Logger = Any


class Task:
    """A deferred action plus a description used in log lines.

    ``run`` never raises: a failure is logged and handed back as the return
    value, so one broken repo cannot take the batch down with it.
    """

    def __init__(self, action: Callable[[], Any], description: str, logger: Logger = default_logger):
        self.action = action
        self.description = description
        self.logger = logger

    def run(self) -> Optional[Exception]:
        self.logger.log_info(f"begin {self.description}")
        try:
            self.action()
        except Exception as exc:
            self.logger.log_error(f"error {self.description}: {exc}")
            return exc
        self.logger.log_success(f"finished {self.description}")
        return None

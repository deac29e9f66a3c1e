from pathlib import Path
import sys
import threading

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class RecordingLogger:
    """Stands in for reposync.infra.logger and keeps (level, message) pairs."""

    def __init__(self):
        self.records = []
        self._lock = threading.Lock()

    def _add(self, level, message):
        with self._lock:
            self.records.append((level, message))

    def log_info(self, message):
        self._add("INFO", message)

    def log_success(self, message):
        self._add("SUCCESS", message)

    def log_warning(self, message):
        self._add("WARNING", message)

    def log_error(self, message):
        self._add("ERROR", message)

    def messages(self, level=None):
        return [message for lvl, message in self.records if level is None or lvl == level]


@pytest.fixture
def recorder():
    return RecordingLogger()

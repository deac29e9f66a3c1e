import subprocess
from types import SimpleNamespace

import pytest

from reposync.core import clone
from reposync.core.clone import clone_repo, get_repo_url
from reposync.errors import CloneError


def test_get_repo_url_is_ssh():
    assert get_repo_url("acme", "widgets") == "git@github.com:acme/widgets"


def test_clone_repo_runs_git_clone(monkeypatch, tmp_path):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return SimpleNamespace(returncode=0, stdout="Cloning into 'widgets'...\n")

    monkeypatch.setattr(clone.subprocess, "run", fake_run)

    target = clone_repo("acme", "widgets", tmp_path)

    assert target == tmp_path / "widgets"
    cmd, kwargs = calls[0]
    assert cmd == ["git", "clone", "git@github.com:acme/widgets", str(tmp_path / "widgets")]
    assert kwargs["stderr"] is subprocess.STDOUT


def test_clone_repo_failure_carries_output(monkeypatch, tmp_path):
    monkeypatch.setattr(
        clone.subprocess,
        "run",
        lambda cmd, **kwargs: SimpleNamespace(returncode=128, stdout="Permission denied (publickey).\n"),
    )

    with pytest.raises(CloneError) as excinfo:
        clone_repo("acme", "widgets", tmp_path)

    assert excinfo.value.returncode == 128
    assert "Permission denied (publickey)." in str(excinfo.value)

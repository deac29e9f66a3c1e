from reposync.application import execution
from reposync.application.execution import run_sync
from reposync.domain.models import SyncConfig, SyncResult
from reposync.errors import SyncError


def _config(**overrides):
    values = {"workdir": "/src", "archivedir": "/old", "token": "t", "org": "acme"}
    values.update(overrides)
    return SyncConfig(**values)


def test_run_sync_summarises_result(monkeypatch, recorder):
    monkeypatch.setattr(
        execution,
        "sync",
        lambda config, logger: SyncResult(
            remote_count=3,
            local_count=2,
            archived=["old"],
            cloned=["new"],
            failed={"broken": "exit status 128 from fatal"},
        ),
    )

    success, summary, error = run_sync(_config(), logger=recorder)

    assert success is True
    assert error == ""
    assert summary["remote"] == 3
    assert summary["local"] == 2
    assert summary["total"] == 3
    assert summary["archived"] == 1
    assert summary["cloned"] == 1
    assert summary["fail"] == 1
    assert summary["failed_reasons"] == {"broken": "exit status 128 from fatal"}
    assert summary["dry_run"] is False


def test_run_sync_reports_fatal_error(monkeypatch, recorder):
    def failing_sync(config, logger):
        raise SyncError("cannot list repos for acme: HTTP 502")

    monkeypatch.setattr(execution, "sync", failing_sync)

    assert run_sync(_config(), logger=recorder) == (False, {}, "cannot list repos for acme: HTTP 502")


def test_run_sync_rejects_invalid_config_before_syncing(monkeypatch, recorder):
    calls = []
    monkeypatch.setattr(execution, "sync", lambda config, logger: calls.append(config))

    success, summary, error = run_sync(_config(token=""), logger=recorder)

    assert (success, summary, error) == (False, {}, "must provide token")
    assert calls == []

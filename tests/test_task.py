from reposync.core.task import Task


def test_task_logs_begin_and_finished(recorder):
    calls = []

    outcome = Task(lambda: calls.append(1), "cloning repo1", recorder).run()

    assert outcome is None
    assert calls == [1]
    assert recorder.records == [
        ("INFO", "begin cloning repo1"),
        ("SUCCESS", "finished cloning repo1"),
    ]


def test_task_swallows_and_logs_failure(recorder):
    def boom():
        raise OSError("disk on fire")

    outcome = Task(boom, "archiving repo2", recorder).run()

    assert isinstance(outcome, OSError)
    assert recorder.records == [
        ("INFO", "begin archiving repo2"),
        ("ERROR", "error archiving repo2: disk on fire"),
    ]

import pytest

from reposync.domain.models import SyncConfig
from reposync.errors import ConfigError


def _config(**overrides):
    values = {"workdir": "/src", "archivedir": "/old", "token": "t", "org": "acme"}
    values.update(overrides)
    return SyncConfig(**values)


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"org": ""}, "must provide user or org"),
        ({"user": "octocat"}, "must provide only one of user or org"),
        ({"workdir": ""}, "must provide dir"),
        ({"archivedir": ""}, "must provide archivedir"),
        ({"token": ""}, "must provide token"),
        ({"org_repo_type": "owner"}, "invalid orgrepotype"),
        ({"org": "", "user": "octocat", "user_repo_type": "sources"}, "invalid userrepotype"),
    ],
)
def test_validate_rejects_bad_config(overrides, message):
    with pytest.raises(ConfigError, match=message):
        _config(**overrides).validate()


def test_account_follows_mode():
    assert _config().account == "acme"
    assert _config().account_kind == "org"
    user_config = _config(org="", user="octocat")
    assert user_config.account == "octocat"
    assert user_config.account_kind == "user"
    user_config.validate()


def test_validate_targets_ignores_missing_token():
    _config(token="").validate_targets()
    with pytest.raises(ConfigError, match="must provide dir"):
        _config(token="", workdir="").validate_targets()

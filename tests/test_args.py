import pytest

from reposync.infra.args import parse_args


def test_single_dash_flags_with_defaults():
    args = parse_args(["-org", "acme", "-dir", "/src", "-archivedir", "/old", "-token", "t"])

    assert args.org == "acme"
    assert args.user == ""
    assert args.dir == "/src"
    assert args.archivedir == "/old"
    assert args.token == "t"
    assert args.orgrepotype == "all"
    assert args.userrepotype == "all"
    assert args.userrepoforks is True
    assert args.dryrun is False
    assert args.version is False


def test_boolean_flags_accept_bare_and_explicit_values():
    args = parse_args(["-user", "octocat", "-dryrun", "-userrepoforks=false"])
    assert args.dryrun is True
    assert args.userrepoforks is False

    args = parse_args(["--user", "octocat", "--dryrun=false", "--userrepoforks", "true"])
    assert args.dryrun is False
    assert args.userrepoforks is True


def test_repo_type_choices_are_enforced():
    with pytest.raises(SystemExit):
        parse_args(["-org", "acme", "-orgrepotype", "owner"])
    with pytest.raises(SystemExit):
        parse_args(["-user", "octocat", "-userrepotype", "forks"])

from conftest import make_repo
from src.application.repository_filter import filter_repositories
from src.domain.name_rules import ExclusionSet


def names(repos):
    return [repo.name for repo in repos]


def test_exclusion_is_case_insensitive():
    repos = [make_repo("x"), make_repo("y")]

    assert names(filter_repositories(repos, ExclusionSet(["X"]))) == ["y"]


def test_survivors_keep_relative_order():
    repos = [make_repo(name) for name in ["delta", "Alpha", "charlie", "bravo", "ECHO"]]

    kept = filter_repositories(repos, ExclusionSet(["alpha", "echo", "not-listed"]))

    assert names(kept) == ["delta", "charlie", "bravo"]


def test_empty_exclusion_set_is_noop():
    repos = [make_repo("a"), make_repo("b")]

    kept = filter_repositories(repos, ExclusionSet())

    assert kept == repos
    assert kept is not repos


def test_exclusion_set_ignores_surrounding_whitespace():
    exclusions = ExclusionSet(["  Dotfiles  ", ""])

    assert "dotfiles" in exclusions
    assert len(exclusions) == 1

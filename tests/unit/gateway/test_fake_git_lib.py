"""Tests for the fake gateways used by code that depends on gitlib."""

from pathlib import Path

import pytest

from gitlib.credentials import Credentials
from gitlib.errors import GitCommandError
from gitlib.gateway.credential_ops.fake import FakeGitCredentialOps
from gitlib.gateway.fake import FakeGitLib
from gitlib.gateway.repo_ops.fake import FakeGitRepoOps

REPO = Path("/repo")


def test_fake_repo_ops_answers_from_configured_state() -> None:
    ops = FakeGitRepoOps(
        remote_urls={(REPO, "origin"): "https://example.com/repo.git"},
        work_trees={REPO: True, REPO / ".git": False},
        top_levels={REPO / "src": REPO},
    )

    assert ops.remote_url("origin", cwd=REPO) == "https://example.com/repo.git"
    assert ops.is_inside_work_tree(cwd=REPO) is True
    assert ops.is_inside_work_tree(cwd=REPO / ".git") is False
    assert ops.top_level(cwd=REPO / "src") == REPO


def test_fake_repo_ops_raises_like_git_outside_a_repository() -> None:
    ops = FakeGitRepoOps()

    with pytest.raises(GitCommandError, match="not a git repository"):
        ops.top_level(cwd=Path("/elsewhere"))
    with pytest.raises(GitCommandError, match="not a git repository"):
        ops.is_inside_work_tree(cwd=Path("/elsewhere"))
    with pytest.raises(GitCommandError, match="No such remote 'origin'"):
        ops.remote_url("origin", cwd=REPO)


def test_fake_remote_add_is_visible_to_remote_url() -> None:
    ops = FakeGitRepoOps()

    ops.remote_add("upstream", "https://example.com/up.git", cwd=REPO)

    assert ops.remote_url("upstream", cwd=REPO) == "https://example.com/up.git"
    assert ops.added_remotes == [(REPO, "upstream", "https://example.com/up.git")]


def test_fake_remote_add_rejects_duplicates() -> None:
    ops = FakeGitRepoOps(remote_urls={(REPO, "origin"): "https://example.com"})

    with pytest.raises(GitCommandError, match="remote origin already exists"):
        ops.remote_add("origin", "https://other.example", cwd=REPO)
    assert ops.added_remotes == []


def test_fake_remote_add_raises_configured_error() -> None:
    ops = FakeGitRepoOps(remote_add_raises=GitCommandError("fatal: boom"))

    with pytest.raises(GitCommandError, match="fatal: boom"):
        ops.remote_add("origin", "https://example.com", cwd=REPO)


def test_fake_repo_ops_uses_current_directory_when_cwd_omitted(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    ops = FakeGitRepoOps(top_levels={Path.cwd(): tmp_path})

    assert ops.top_level() == tmp_path


def test_fake_credential_store_round_trip() -> None:
    """approve stores, fill returns the stored record, reject forgets it."""
    ops = FakeGitCredentialOps()
    url = "https://example.com"
    creds = Credentials.with_url_username_password(url, "bob", "secret")

    ops.credentials_approve(creds)
    assert ops.credentials_fill(url) == creds

    ops.credentials_reject(creds)
    assert ops.credentials_fill(url) == Credentials.with_url(url)

    assert ops.approved == [creds]
    assert ops.rejected == [creds]
    assert ops.filled_urls == [url, url]
    assert ops.stored == {}


def test_fake_credential_fill_default_and_errors() -> None:
    default = Credentials(username="", password="")
    assert FakeGitCredentialOps(fill_default=default).credentials_fill("https://x") == default

    failing = FakeGitCredentialOps(fill_raises=GitCommandError("terminal prompts disabled"))
    with pytest.raises(GitCommandError, match="terminal prompts disabled"):
        failing.credentials_fill("https://x")
    assert failing.filled_urls == ["https://x"]


def test_fake_git_lib_exposes_sub_gateways() -> None:
    repo = FakeGitRepoOps(top_levels={REPO: REPO})
    fake = FakeGitLib(repo=repo)

    assert fake.repo is repo
    assert fake.repo_fake is repo
    assert isinstance(fake.credential_fake, FakeGitCredentialOps)
    assert fake.repo.top_level(cwd=REPO) == REPO


def test_fake_repo_ops_copies_configured_state() -> None:
    """Later changes to the caller's dicts don't leak into the fake."""
    remote_urls = {(REPO, "origin"): "https://example.com"}
    work_trees = {REPO: True}
    top_levels = {REPO: REPO}
    ops = FakeGitRepoOps(remote_urls=remote_urls, work_trees=work_trees, top_levels=top_levels)

    remote_urls.clear()
    work_trees[REPO] = False
    top_levels.clear()
    ops.remote_add("upstream", "https://example.com/up.git", cwd=REPO)

    assert ops.remote_url("origin", cwd=REPO) == "https://example.com"
    assert ops.is_inside_work_tree(cwd=REPO) is True
    assert ops.top_level(cwd=REPO) == REPO
    assert remote_urls == {}


def test_fake_credential_store_keys_decomposed_records_by_url() -> None:
    ops = FakeGitCredentialOps()
    creds = Credentials(protocol="https", host="example.com", username="bob", password="secret")

    ops.credentials_approve(creds)
    assert ops.credentials_fill("https://example.com") == creds

    ops.credentials_reject(Credentials(protocol="https", host="example.com"))
    assert ops.stored == {}

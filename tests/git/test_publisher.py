"""Tests for the git publisher."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

import pytest

from foliogen.git.publisher import PublishError, Publisher


def _repo(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    (repo / "projects").mkdir(parents=True)
    (repo / ".git").mkdir()
    return repo


def _recording_runner(calls, failures=()):  # type: ignore[no-untyped-def]
    def runner(args, cwd, env=None, capture_output=False):
        command = list(args)
        calls.append((command, Path(cwd)))
        for prefix in failures:
            if command[: len(prefix)] == list(prefix):
                raise subprocess.CalledProcessError(1, command, stderr="fatal: rejected\n")
        return ""

    return runner


def test_publish_stages_commits_and_pushes(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    calls: list = []
    publisher = Publisher(runner=_recording_runner(calls))

    branch = publisher.publish(
        repo,
        repo / "projects" / "day-7-my-app.html",
        repo / "browse.html",
        title="My App",
    )

    assert branch == "main"
    commands = [command for command, _ in calls]
    assert commands[0] == ["git", "add", "projects/day-7-my-app.html"]
    assert commands[1] == ["git", "add", "browse.html"]
    assert commands[2] == [
        "git",
        "commit",
        "-m",
        "Add My App project page\n\n"
        "- Created projects/day-7-my-app.html\n"
        "- Added project card to browse.html",
    ]
    assert commands[3] == ["git", "push", "origin", "main"]
    assert len(commands) == 4
    assert all(cwd == repo for _, cwd in calls)


def test_push_falls_back_to_master(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    calls: list = []
    publisher = Publisher(runner=_recording_runner(calls, failures=[("git", "push", "origin", "main")]))

    branch = publisher.publish(repo, repo / "projects" / "p.html", repo / "browse.html", title="P")

    assert branch == "master"
    assert [command for command, _ in calls][-2:] == [
        ["git", "push", "origin", "main"],
        ["git", "push", "origin", "master"],
    ]


def test_push_failure_on_every_branch_raises(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    publisher = Publisher(runner=_recording_runner([], failures=[("git", "push")]))

    with pytest.raises(PublishError) as excinfo:
        publisher.publish(repo, repo / "projects" / "p.html", repo / "browse.html", title="P")

    message = str(excinfo.value)
    assert "main, master" in message
    assert "fatal: rejected" in message


def test_commit_failure_raises_without_pushing(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    calls: list = []
    publisher = Publisher(runner=_recording_runner(calls, failures=[("git", "commit")]))

    with pytest.raises(PublishError, match="git commit failed"):
        publisher.publish(repo, repo / "projects" / "p.html", repo / "browse.html", title="P")

    assert not any(command[:2] == ["git", "push"] for command, _ in calls)


def test_stage_failure_is_logged_and_skipped(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(logging.getLogger("foliogen"), "propagate", True)
    repo = _repo(tmp_path)
    calls: list = []
    publisher = Publisher(
        runner=_recording_runner(calls, failures=[("git", "add", "projects/p.html")])
    )

    with caplog.at_level(logging.WARNING, logger="foliogen"):
        branch = publisher.publish(repo, repo / "projects" / "p.html", repo / "browse.html", title="P")

    assert branch == "main"
    assert "Could not stage projects/p.html" in caplog.text
    assert ["git", "add", "browse.html"] in [command for command, _ in calls]


def test_publish_requires_git_repository(tmp_path: Path) -> None:
    calls: list = []
    publisher = Publisher(runner=_recording_runner(calls))

    with pytest.raises(PublishError, match="not a git repository"):
        publisher.publish(tmp_path, tmp_path / "p.html", tmp_path / "browse.html", title="P")

    assert calls == []


def test_custom_remote_and_branches(tmp_path: Path) -> None:
    repo = _repo(tmp_path)
    calls: list = []
    publisher = Publisher(runner=_recording_runner(calls), remote="upstream", branches=["gh-pages"])

    assert publisher.push(repo) == "gh-pages"
    assert calls[-1][0] == ["git", "push", "upstream", "gh-pages"]

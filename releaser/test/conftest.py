"""Shared fixtures: isolated git environment and throwaway repositories."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest


def git(*args: str, cwd: Path) -> str:
    """Run git for fixture setup; fails the test on error."""
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=True,
    )
    return proc.stdout


@dataclass(frozen=True)
class GitSandbox:
    """A bare origin plus a working clone that has pushed main and tag 1.2.3."""

    origin: Path
    work: Path

    def git(self, *args: str, repo: Path | None = None) -> str:
        return git(*args, cwd=repo or self.work)

    def branches(self, repo: Path | None = None) -> list[str]:
        out = git("branch", "--format=%(refname:short)", cwd=repo or self.work)
        return out.split()

    def tags(self, repo: Path | None = None) -> list[str]:
        return git("tag", "--list", cwd=repo or self.work).split()

    def head_subject(self, repo: Path | None = None) -> str:
        return git("log", "-1", "--format=%s", cwd=repo or self.work).strip()

    def current_branch(self, repo: Path | None = None) -> str:
        return git("rev-parse", "--abbrev-ref", "HEAD", cwd=repo or self.work).strip()


@pytest.fixture
def git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate git from the user's global and system config."""
    if shutil.which("git") is None:
        pytest.skip("git not installed")
    global_config = tmp_path / "gitconfig"
    global_config.write_text("", encoding="utf-8")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Release Bot")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "release@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Release Bot")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "release@example.com")
    monkeypatch.setenv("GIT_TERMINAL_PROMPT", "0")


@pytest.fixture
def sandbox(tmp_path: Path, git_env: None) -> GitSandbox:
    origin = tmp_path / "origin.git"
    origin.mkdir()
    git("init", "--bare", "-b", "main", cwd=origin)

    work = tmp_path / "work"
    work.mkdir()
    git("init", "-b", "main", cwd=work)
    (work / "README.md").write_text("# tool\n", encoding="utf-8")
    git("add", "README.md", cwd=work)
    git("commit", "-m", "Initial commit", cwd=work)
    git("tag", "1.2.3", cwd=work)
    git("remote", "add", "origin", str(origin), cwd=work)
    git("push", "origin", "main", "--tags", cwd=work)

    return GitSandbox(origin=origin, work=work.resolve())

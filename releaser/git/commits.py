"""Commit primitive."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from releaser.core.errors import ReleaseError
from releaser.core.result import Err, Ok, Result
from releaser.git.repository import Repository

__all__ = ["Commits", "GitCommits"]


class Commits(Protocol):
    def commit(
        self, repo: Repository, paths: list[Path], message: str
    ) -> Result[None, ReleaseError]: ...


class GitCommits:
    """Commit primitive backed by the git CLI.

    ``paths`` are staged before committing; an empty list stages nothing and
    commits the index as it is. With ``allow_empty`` the commit is created
    even when the index matches HEAD, which is what a bare release marker
    commit needs.
    """

    def __init__(self, *, allow_empty: bool = True) -> None:
        self.allow_empty = allow_empty

    def commit(self, repo: Repository, paths: list[Path], message: str) -> Result[None, ReleaseError]:
        if paths:
            rels = [str(p.relative_to(repo.path)) if p.is_absolute() else str(p) for p in paths]
            add = repo.run(["add", "-A", "--", *rels])
            if isinstance(add, Err):
                return Err(
                    ReleaseError(
                        kind="git_failed",
                        message="git add failed",
                        hint=add.error.detail,
                    )
                )

        cmd = ["commit", "-m", message]
        if self.allow_empty:
            cmd.append("--allow-empty")

        result = repo.run(cmd)
        if isinstance(result, Err):
            e = result.error
            output = f"{e.stdout}\n{e.stderr}"
            if "nothing to commit" in output or "no changes added to commit" in output:
                return Err(
                    ReleaseError(
                        kind="nothing_to_commit",
                        message="nothing to commit",
                        hint="Stage the release changes first, or set allow_empty_commit.",
                    )
                )
            hint = e.stderr.strip() or None
            if hint is None:
                hint = "Configure git user.name/user.email, then retry."
            return Err(
                ReleaseError(
                    kind="git_failed",
                    message="git commit failed",
                    hint=hint,
                )
            )
        return Ok(None)

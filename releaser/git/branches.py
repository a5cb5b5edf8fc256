"""Branch primitives: create and check out a local branch."""

from __future__ import annotations

from typing import Protocol

from releaser.core.errors import ReleaseError
from releaser.core.result import Err, Ok, Result
from releaser.git.repository import Repository

__all__ = ["Branches", "GitBranches"]


class Branches(Protocol):
    def create_branch(self, repo: Repository, name: str) -> Result[None, ReleaseError]: ...

    def checkout_branch(self, repo: Repository, name: str) -> Result[None, ReleaseError]: ...


class GitBranches:
    """Branch primitives backed by the git CLI."""

    def create_branch(self, repo: Repository, name: str) -> Result[None, ReleaseError]:
        """Create branch name at HEAD. Never overwrites an existing branch."""
        if repo.ref_exists(f"refs/heads/{name}"):
            return Err(
                ReleaseError(
                    kind="branch_exists",
                    message=f"branch already exists: {name}",
                    hint="Delete the branch or release a different version.",
                )
            )

        result = repo.run(["branch", name])
        if isinstance(result, Err):
            e = result.error
            kind = "branch_exists" if "already exists" in e.stderr else "git_failed"
            return Err(
                ReleaseError(
                    kind=kind,
                    message=f"failed to create branch: {name}",
                    hint=e.detail,
                )
            )
        return Ok(None)

    def checkout_branch(self, repo: Repository, name: str) -> Result[None, ReleaseError]:
        if not repo.ref_exists(f"refs/heads/{name}"):
            return Err(
                ReleaseError(
                    kind="branch_not_found",
                    message=f"branch not found: {name}",
                )
            )

        result = repo.run(["checkout", name, "--"])
        if isinstance(result, Err):
            return Err(
                ReleaseError(
                    kind="git_failed",
                    message=f"failed to check out branch: {name}",
                    hint=result.error.detail,
                )
            )
        return Ok(None)

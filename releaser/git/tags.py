"""Tag primitives: create a tag and list existing ones."""

from __future__ import annotations

from typing import Protocol

from releaser.core.errors import ReleaseError
from releaser.core.result import Err, Ok, Result
from releaser.git.repository import Repository

__all__ = ["GitTags", "Tags"]


class Tags(Protocol):
    def create_tag(
        self,
        repo: Repository,
        name: str,
        target: str | None = None,
        message: str | None = None,
    ) -> Result[None, ReleaseError]: ...

    def list_tags(self, repo: Repository) -> Result[list[str], ReleaseError]: ...


class GitTags:
    """Tag primitives backed by the git CLI."""

    def create_tag(
        self,
        repo: Repository,
        name: str,
        target: str | None = None,
        message: str | None = None,
    ) -> Result[None, ReleaseError]:
        """Create tag name at target (HEAD when None).

        The tag is lightweight unless a message is given, in which case it
        is annotated with that message.
        """
        if repo.ref_exists(f"refs/tags/{name}"):
            return Err(
                ReleaseError(
                    kind="tag_exists",
                    message=f"tag already exists: {name}",
                )
            )

        cmd = ["tag"]
        if message is not None:
            cmd += ["-a", "-m", message]
        cmd.append(name)
        if target is not None:
            cmd.append(target)

        result = repo.run(cmd)
        if isinstance(result, Err):
            e = result.error
            kind = "tag_exists" if "already exists" in e.stderr else "git_failed"
            return Err(
                ReleaseError(
                    kind=kind,
                    message=f"failed to create tag: {name}",
                    hint=e.detail,
                )
            )
        return Ok(None)

    def list_tags(self, repo: Repository) -> Result[list[str], ReleaseError]:
        result = repo.run(["tag", "--list"])
        match result:
            case Err(e):
                return Err(
                    ReleaseError(
                        kind="git_failed",
                        message="failed to list tags",
                        hint=e.detail,
                    )
                )
            case Ok(stdout):
                return Ok([ln.strip() for ln in stdout.splitlines() if ln.strip()])

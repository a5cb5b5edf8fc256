"""Remote primitives: resolve a remote's URL and push refs to it."""

from __future__ import annotations

from typing import Protocol

from releaser.core.errors import ReleaseError
from releaser.core.result import Err, Ok, Result
from releaser.git.repository import Repository
from releaser.platform.process import ProcessError

__all__ = ["GitRemotes", "Remotes"]

_AUTH_MARKERS = ("Authentication failed", "Permission denied", "could not read Username")
_REJECT_MARKERS = ("[rejected]", "non-fast-forward", "fetch first", "already exists")
_MISSING_REMOTE_MARKERS = ("does not appear to be a git repository", "No such remote")


class Remotes(Protocol):
    def remote_url(self, repo: Repository, name: str) -> Result[str, ReleaseError]: ...

    def push_branch(
        self, repo: Repository, branch: str, remote: str
    ) -> Result[None, ReleaseError]: ...

    def push_tag(self, repo: Repository, tag: str, remote: str) -> Result[None, ReleaseError]: ...


class GitRemotes:
    """Remote primitives backed by the git CLI. Pushes are never retried."""

    def remote_url(self, repo: Repository, name: str) -> Result[str, ReleaseError]:
        """Resolve the fetch URL of the named remote."""
        result = repo.run(["remote", "get-url", name])
        match result:
            case Err(e):
                return Err(
                    ReleaseError(
                        kind="remote_not_found",
                        message=f"remote not configured: {name}",
                        hint=e.detail,
                    )
                )
            case Ok(stdout):
                url = stdout.strip()
                if not url:
                    return Err(
                        ReleaseError(
                            kind="remote_not_found",
                            message=f"remote has no url: {name}",
                        )
                    )
                return Ok(url)

    def push_branch(self, repo: Repository, branch: str, remote: str) -> Result[None, ReleaseError]:
        ref = f"refs/heads/{branch}"
        return self._push(repo, remote, f"{ref}:{ref}", label=f"branch {branch}")

    def push_tag(self, repo: Repository, tag: str, remote: str) -> Result[None, ReleaseError]:
        ref = f"refs/tags/{tag}"
        return self._push(repo, remote, f"{ref}:{ref}", label=f"tag {tag}")

    def _push(
        self, repo: Repository, remote: str, refspec: str, *, label: str
    ) -> Result[None, ReleaseError]:
        result = repo.run(["push", remote, refspec])
        if isinstance(result, Err):
            return Err(_push_error(result.error, remote=remote, label=label))
        return Ok(None)


def _push_error(e: ProcessError, *, remote: str, label: str) -> ReleaseError:
    """Classify a failed push by what git reported."""
    detail = e.detail
    if any(marker in detail for marker in _MISSING_REMOTE_MARKERS):
        return ReleaseError(
            kind="remote_not_found",
            message=f"remote not reachable: {remote}",
            hint=detail,
        )
    if any(marker in detail for marker in _AUTH_MARKERS):
        reason = "authentication failed"
    elif any(marker in detail for marker in _REJECT_MARKERS):
        reason = "rejected by remote"
    else:
        reason = "failed"
    return ReleaseError(
        kind="push_rejected",
        message=f"push of {label} to {remote} {reason}",
        hint=detail,
    )

"""Git repository handle and repository access.

A ``Repository`` is the handle every release step operates on: the path of a
working tree plus a way to run git inside it. Handles are produced by
``open_repository`` (existing local checkout) or ``clone_repository``
(fresh clone of a remote).

Usage:
    match open_repository(Path(".")):
        case Ok(repo):
            print(f"Releasing {repo.path}")
        case Err(e):
            print(e.pretty())
"""

from __future__ import annotations

import re
from pathlib import Path

from releaser.core.errors import ReleaseError
from releaser.core.result import Err, Ok, Result
from releaser.platform.process import ProcessError
from releaser.platform.process import run as run_process

GIT_QUERY_TIMEOUT_SECONDS = 30.0

_QUERY_COMMANDS = frozenset({"rev-parse", "status", "log", "show-ref"})

__all__ = [
    "GIT_QUERY_TIMEOUT_SECONDS",
    "Repository",
    "clone_repository",
    "open_repository",
    "repo_path",
    "run_git",
]


class Repository:
    """Handle on a working git repository.

    Attributes:
        path: Path to the repository root (the working tree top level)
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"Repository({str(self.path)!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Repository) and other.path == self.path

    def __hash__(self) -> int:
        return hash(self.path)

    def run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_git(args, cwd=self.path)

    def ref_exists(self, ref: str) -> bool:
        """Check whether a fully qualified ref (e.g. refs/tags/1.0.0) exists."""
        result = self.run(["rev-parse", "--verify", "--quiet", ref])
        return isinstance(result, Ok)


def run_git(args: list[str], *, cwd: Path) -> Result[str, ProcessError]:
    """Run git in cwd.

    Read-only queries are bounded by GIT_QUERY_TIMEOUT_SECONDS. Everything else
    (clone, push, commit, tag, ...) runs without a time limit.
    """
    timeout = GIT_QUERY_TIMEOUT_SECONDS if _is_query(args) else None
    return run_process(["git", *args], cwd=cwd, timeout=timeout)


def _is_query(args: list[str]) -> bool:
    match args:
        case [command, *_] if command in _QUERY_COMMANDS:
            return True
        case ["tag", "--list", *_] | ["remote", "get-url", *_]:
            return True
        case _:
            return False


def open_repository(path: Path) -> Result[Repository, ReleaseError]:
    """Open the git repository containing path.

    Returns:
        Ok(Repository) rooted at the working tree top level
        Err(ReleaseError) with kind "invalid_path" or "not_a_repository"
    """
    if not path.is_dir():
        return Err(
            ReleaseError(
                kind="invalid_path",
                message=f"not a directory: {path}",
            )
        )

    result = run_git(["rev-parse", "--show-toplevel"], cwd=path)
    match result:
        case Err(e):
            return Err(
                ReleaseError(
                    kind="not_a_repository",
                    message=f"not a git repository: {path}",
                    hint=e.detail,
                )
            )
        case Ok(stdout):
            top = stdout.strip()
            if not top:
                # Bare repositories have no working tree to release from.
                return Err(
                    ReleaseError(
                        kind="not_a_repository",
                        message=f"repository has no working tree: {path}",
                    )
                )
            return Ok(Repository(Path(top)))


def clone_repository(url: str, dest: Path) -> Result[Repository, ReleaseError]:
    """Clone url into dest and return a handle on the clone.

    dest must not exist, or be an empty directory.
    """
    if dest.exists() and (not dest.is_dir() or any(dest.iterdir())):
        return Err(
            ReleaseError(
                kind="clone_failed",
                message=f"clone destination is not empty: {dest}",
            )
        )

    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return Err(
            ReleaseError(
                kind="clone_failed",
                message=f"cannot create clone destination: {dest.parent}",
                hint=str(e),
            )
        )

    result = run_git(["clone", "--", url, str(dest)], cwd=dest.parent)
    if isinstance(result, Err):
        return Err(
            ReleaseError(
                kind="clone_failed",
                message=f"failed to clone {url}",
                hint=result.error.detail,
            )
        )
    return Ok(Repository(dest.resolve()))


_URL_NAME_RE = re.compile(r"[/:\\]")


def repo_path(url: str, directory: Path) -> Result[Path, ReleaseError]:
    """Derive the clone destination for url inside directory.

    "https://host/org/tool.git" and "git@host:org/tool.git" both map to
    directory / "tool".
    """
    tail = _URL_NAME_RE.split(url.rstrip("/\\"))[-1]
    name = tail.removesuffix(".git")
    if not name or name in {".", ".."}:
        return Err(
            ReleaseError(
                kind="invalid_path",
                message=f"cannot derive a repository name from url: {url}",
            )
        )
    return Ok(directory / name)
